import pytest

from insureconnect_api.app.core.db import Database
from insureconnect_api.app.core.errors import (
    DuplicateError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from insureconnect_api.app.core.seed import SAMPLE_PROVIDERS
from insureconnect_api.app.services.provider_service import (
    ProviderService,
    parse_price_bound,
    validate_provider,
)

from .conftest import run


def _provider(provider_id="x1", name="X", price=100, website_link="http://x"):
    return {"provider_id": provider_id, "name": name, "price": price, "website_link": website_link}


class TestParsePriceBound:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent(self, value):
        assert parse_price_bound(value, "minimum") is None

    @pytest.mark.parametrize("value,expected", [("400", 400.0), (" 12.5 ", 12.5), (0, 0.0), ("-3", -3.0), (".5", 0.5), ("1e3", 1000.0), ("+7.", 7.0)])
    def test_numbers(self, value, expected):
        assert parse_price_bound(value, "minimum") == expected

    @pytest.mark.parametrize("value", ["abc", "nan", "inf", "12abc", "1_000", "0x10", "200usd", "1e999", True])
    def test_invalid_names_the_bound(self, value):
        with pytest.raises(ValidationError, match="Invalid maximum price"):
            parse_price_bound(value, "maximum")


class TestValidateProvider:
    def test_accepts_zero_price(self):
        assert validate_provider(_provider(price=0)).price == 0

    @pytest.mark.parametrize("missing", ["provider_id", "name", "price", "website_link"])
    def test_missing_field(self, missing):
        record = _provider()
        del record[missing]
        with pytest.raises(ValidationError, match="All fields are required"):
            validate_provider(record)

    def test_blank_field_counts_as_missing(self):
        with pytest.raises(ValidationError, match="All fields are required"):
            validate_provider(_provider(name="  "))

    @pytest.mark.parametrize("price", [-5, "450", True, float("nan"), float("inf")])
    def test_bad_price(self, price):
        with pytest.raises(ValidationError, match="Price must be a positive number"):
            validate_provider(_provider(price=price))

    def test_text_fields_must_be_strings(self):
        with pytest.raises(ValidationError, match="name must be a string"):
            validate_provider(_provider(name=42))

    def test_extra_keys_ignored(self):
        record = dict(_provider(), rating=5)
        assert validate_provider(record).provider_id == "x1"

    def test_null_field_counts_as_missing(self):
        with pytest.raises(ValidationError, match="All fields are required"):
            validate_provider(_provider(website_link=None))

    def test_not_a_mapping(self):
        with pytest.raises(ValidationError, match="Provider must be a JSON object"):
            validate_provider(["x1", "X", 100, "http://x"])

    def test_validated_model_passes_through(self):
        model = validate_provider(_provider())
        assert validate_provider(model) is model


class TestListProviders:
    def test_empty_store(self, service):
        assert run(service.list_providers()) == []

    def test_sorted_ascending(self, service):
        for pid, price in [("a", 300), ("b", 100), ("c", 200.5)]:
            run(service.create_provider(_provider(provider_id=pid, price=price)))
        prices = [p.price for p in run(service.list_providers())]
        assert prices == [100, 200.5, 300]

    def test_bounds_are_inclusive(self, service):
        for pid, price in [("a", 99), ("b", 100), ("c", 150), ("d", 200), ("e", 201)]:
            run(service.create_provider(_provider(provider_id=pid, price=price)))
        result = run(service.list_providers("100", "200"))
        assert [p.provider_id for p in result] == ["b", "c", "d"]

    def test_single_bounds(self, service):
        for pid, price in [("a", 50), ("b", 500)]:
            run(service.create_provider(_provider(provider_id=pid, price=price)))
        assert [p.provider_id for p in run(service.list_providers(min_price="100"))] == ["b"]
        assert [p.provider_id for p in run(service.list_providers(max_price=100))] == ["a"]

    def test_inverted_bounds_fail_even_when_empty(self, service):
        with pytest.raises(ValidationError, match="cannot be greater"):
            run(service.list_providers("600", "400"))

    def test_minimum_checked_before_maximum(self, service):
        with pytest.raises(ValidationError, match="Invalid minimum price"):
            run(service.list_providers("abc", "xyz"))

    def test_equal_bounds(self, service):
        run(service.create_provider(_provider(provider_id="a", price=450)))
        assert len(run(service.list_providers(450, 450))) == 1


class TestCreateGetDelete:
    def test_create_then_get(self, service):
        created = run(service.create_provider(_provider()))
        fetched = run(service.get_provider("x1"))
        assert created == fetched
        assert fetched.name == "X"
        assert fetched.price == 100
        assert isinstance(fetched.price, int)
        assert fetched.created_at and fetched.updated_at

    def test_negative_price_rejected(self, service):
        with pytest.raises(ValidationError):
            run(service.create_provider(_provider(price=-5)))
        assert run(service.count_providers()) == 0

    def test_duplicate_keeps_first(self, service):
        run(service.create_provider(_provider(name="First")))
        with pytest.raises(DuplicateError, match="Provider ID already exists"):
            run(service.create_provider(_provider(name="Second", price=999)))
        providers = run(service.list_providers())
        assert len(providers) == 1
        assert providers[0].name == "First"
        assert providers[0].price == 100

    def test_get_unknown(self, service):
        with pytest.raises(NotFoundError, match="Provider not found"):
            run(service.get_provider("nope"))

    def test_delete_unknown_does_not_mutate(self, service):
        run(service.create_provider(_provider()))
        with pytest.raises(NotFoundError):
            run(service.delete_provider("nope"))
        assert run(service.count_providers()) == 1

    def test_delete_known(self, service):
        run(service.create_provider(_provider()))
        run(service.delete_provider("x1"))
        with pytest.raises(NotFoundError):
            run(service.get_provider("x1"))


class TestResetAndSeed:
    def test_seed_replaces_everything(self, service):
        run(service.create_provider(_provider(provider_id="old")))
        count = run(service.reset_and_seed())
        assert count == len(SAMPLE_PROVIDERS) == 31
        assert run(service.count_providers()) == 31
        with pytest.raises(NotFoundError):
            run(service.get_provider("old"))

    def test_seeded_price_range(self, service):
        run(service.reset_and_seed())
        result = run(service.list_providers(400, 600))
        prices = [p.price for p in result]
        expected = sorted(p["price"] for p in SAMPLE_PROVIDERS if 400 <= p["price"] <= 600)
        assert prices == expected
        names = {p.name for p in result}
        assert "ISO Insurance" in names
        assert "Student Secure" not in names

    def test_failed_seed_rolls_back(self, service):
        run(service.create_provider(_provider(provider_id="keep")))
        with pytest.raises(DuplicateError):
            run(service.reset_and_seed([_provider(provider_id="a"), _provider(provider_id="a")]))
        assert [p.provider_id for p in run(service.list_providers())] == ["keep"]

    def test_invalid_seed_record_rejected_before_delete(self, service):
        run(service.create_provider(_provider(provider_id="keep")))
        with pytest.raises(ValidationError):
            run(service.reset_and_seed([_provider(price=-1)]))
        assert run(service.count_providers()) == 1


def test_closed_database_raises_store_error():
    service = ProviderService(Database(":memory:"))
    with pytest.raises(StoreError, match="not available"):
        run(service.list_providers())
    with pytest.raises(StoreError):
        run(service.create_provider(_provider()))
