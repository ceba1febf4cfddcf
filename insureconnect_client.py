"""InsureConnect API client and terminal listing.

This module wraps the InsureConnect HTTP API with ``requests`` and
renders providers as plain‑text cards, mirroring what the web front end
shows: the full list on start, a budget filter with the same
client‑side checks, and a "Showing N providers" summary.

The client exposes:

* :meth:`InsureConnectAPI.list_providers` – optionally filtered by price.
* :meth:`InsureConnectAPI.get_provider` – fetch one provider by id.
* :meth:`InsureConnectAPI.create_provider` / :meth:`InsureConnectAPI.delete_provider`.
* :meth:`InsureConnectAPI.health` and :meth:`InsureConnectAPI.seed`.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` (``None`` for client‑side or network errors) and
``message``.

Usage::

    python insureconnect_client.py list --min 400 --max 600
"""

from __future__ import annotations

import argparse
import logging
import math
import os
import re
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"

Error = Dict[str, Any]

# Same notation the API accepts for price bounds.
DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _parse_bound(value: Optional[str]) -> Optional[float]:
    if value is None or not str(value).strip():
        return None
    text = str(value).strip()
    if not DECIMAL_RE.fullmatch(text):
        return math.nan
    number = float(text)
    return number if math.isfinite(number) else math.nan


def validate_price_filter(min_price: Optional[str], max_price: Optional[str]) -> Optional[str]:
    """Check budget inputs before they are sent to the API.

    Returns the message to show the user, or ``None`` when the inputs
    are acceptable.  Blank inputs mean "Any".
    """
    low = _parse_bound(min_price)
    high = _parse_bound(max_price)
    if low is not None and math.isnan(low):
        return "Please enter a valid minimum price"
    if high is not None and math.isnan(high):
        return "Please enter a valid maximum price"
    if low is not None and high is not None and low > high:
        return "Minimum price cannot be greater than maximum price"
    return None


class InsureConnectAPI:
    """Client for the InsureConnect provider API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the ``/api`` prefix,
                e.g. ``http://localhost:5000/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Provider operations
    # ------------------------------------------------------------------
    def list_providers(
        self, min_price: Optional[str] = None, max_price: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve providers, cheapest first, optionally within a budget.

        Invalid bounds are rejected locally without contacting the API.
        """
        problem = validate_price_filter(min_price, max_price)
        if problem:
            return [], {"status_code": None, "message": problem}
        params: Dict[str, str] = {}
        if min_price is not None and str(min_price).strip():
            params["minPrice"] = str(min_price).strip()
        if max_price is not None and str(max_price).strip():
            params["maxPrice"] = str(max_price).strip()
        data, error = self._request("GET", "/providers", params=params or None)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_provider(self, provider_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/providers/{quote(str(provider_id), safe='')}")

    def create_provider(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/providers", json_body=payload)

    def delete_provider(self, provider_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/providers/{quote(str(provider_id), safe='')}")
        return error is None, error

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

    def seed(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Reset the provider collection to the sample dataset."""
        return self._request("POST", "/seed")


# ----------------------------------------------------------------------
# Rendering
# ----------------------------------------------------------------------
def format_price(price: Any) -> str:
    if isinstance(price, float) and price.is_integer():
        price = int(price)
    return f"${price}"


def render_provider_card(provider: Dict[str, Any]) -> str:
    """Render one provider as a small text card."""
    lines = [
        provider.get("name", "Unknown provider"),
        f"  Price per semester: {format_price(provider.get('price'))}",
        f"  Visit website: {provider.get('website_link', '')}",
    ]
    return "\n".join(lines)


def render_listing(
    providers: Sequence[Dict[str, Any]],
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
) -> str:
    """Render the summary line followed by one card per provider."""
    if not providers:
        return (
            "No providers found\n"
            "We couldn't find any insurance providers matching your criteria. "
            "Try adjusting your price range."
        )
    noun = "provider" if len(providers) == 1 else "providers"
    summary = f"Showing {len(providers)} {noun}"
    has_min = bool(min_price and str(min_price).strip())
    has_max = bool(max_price and str(max_price).strip())
    if has_min or has_max:
        low = f"${str(min_price).strip()}" if has_min else "Any"
        high = f"${str(max_price).strip()}" if has_max else "Any"
        summary += f" in your price range ({low} - {high})"
    cards = [render_provider_card(provider) for provider in providers]
    return "\n\n".join([summary] + cards)


# ----------------------------------------------------------------------
# Command line
# ----------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Browse student health-insurance providers.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("INSURECONNECT_API_URL", DEFAULT_BASE_URL),
        help="API base URL including the /api prefix (env INSURECONNECT_API_URL)",
    )
    sub = ap.add_subparsers(dest="command", required=True)
    list_cmd = sub.add_parser("list", help="List providers, cheapest first")
    list_cmd.add_argument("--min", dest="min_price", help="Minimum price per semester")
    list_cmd.add_argument("--max", dest="max_price", help="Maximum price per semester")
    get_cmd = sub.add_parser("get", help="Show a single provider")
    get_cmd.add_argument("provider_id")
    sub.add_parser("seed", help="Reset the database to the sample providers")
    sub.add_parser("health", help="Check that the API is up")
    return ap


def main(argv: Optional[Sequence[str]] = None, api: Optional[InsureConnectAPI] = None) -> int:
    args = build_parser().parse_args(argv)
    api = api or InsureConnectAPI(base_url=args.base_url)

    if args.command == "list":
        providers, error = api.list_providers(args.min_price, args.max_price)
        if error:
            print(f"[!] {error['message']}", file=sys.stderr)
            return 1
        print(render_listing(providers, args.min_price, args.max_price))
        return 0

    if args.command == "get":
        provider, error = api.get_provider(args.provider_id)
        if error:
            print(f"[!] {error['message']}", file=sys.stderr)
            return 1
        print(render_provider_card(provider))
        return 0

    if args.command == "seed":
        result, error = api.seed()
        if error:
            print(f"[!] {error['message']}", file=sys.stderr)
            return 1
        print(f"{result['message']} ({result['count']} providers)")
        return 0

    result, error = api.health()
    if error:
        print(f"[!] API unavailable: {error['message']}", file=sys.stderr)
        return 1
    print(f"{result['status']}: {result['message']}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
