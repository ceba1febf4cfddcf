"""
Development dataset loaded by ``POST /api/seed``.

Prices are per semester in US dollars.  Seeding replaces the whole
collection, so this list is the complete set a fresh development
database starts with.
"""

from typing import Any, Dict, List

SAMPLE_PROVIDERS: List[Dict[str, Any]] = [
    {"provider_id": "iso_001", "name": "ISO Insurance", "price": 450, "website_link": "https://www.isoa.org"},
    {"provider_id": "sg_002", "name": "Student Guard", "price": 600, "website_link": "https://www.studentguard.com"},
    {"provider_id": "icp_003", "name": "International Care Plus", "price": 550, "website_link": "https://www.intlcareplus.com"},
    {"provider_id": "chs_004", "name": "Campus Health Shield", "price": 480, "website_link": "https://www.campushealth.com"},
    {"provider_id": "gsi_005", "name": "Global Student Insurance", "price": 520, "website_link": "https://www.globalstudent.com"},
    {"provider_id": "acn_006", "name": "Academic Care Network", "price": 395, "website_link": "https://www.academiccare.com"},
    {"provider_id": "eyt_007", "name": "Student Secure", "price": 105, "website_link": "http://www.internationalstudentinsurance.com"},
    {"provider_id": "fdu_008", "name": "Student Journey Lite", "price": 150, "website_link": "https://www.imglobal.com/travel-medical-insurance/student-journey-lite"},
    {"provider_id": "uhi_007", "name": "Universal Health Insurance", "price": 475, "website_link": "https://www.universalhealth.com"},
    {"provider_id": "psi_008", "name": "Premier Student Insurance", "price": 425, "website_link": "https://www.premierstudent.com"},
    {"provider_id": "gci_009", "name": "Global Care International", "price": 565, "website_link": "https://www.globalcare.com"},
    {"provider_id": "asi_010", "name": "American Student Insurance", "price": 510, "website_link": "https://www.americanstudent.com"},
    {"provider_id": "cps_011", "name": "Compass Student Health", "price": 340, "website_link": "https://www.compassstudenthealth.com"},
    {"provider_id": "ush_012", "name": "UniShield Basic", "price": 210, "website_link": "https://www.unishield.com/basic"},
    {"provider_id": "ush_013", "name": "UniShield Plus", "price": 415, "website_link": "https://www.unishield.com/plus"},
    {"provider_id": "ush_014", "name": "UniShield Premium", "price": 690, "website_link": "https://www.unishield.com/premium"},
    {"provider_id": "atl_015", "name": "Atlas Scholar Care", "price": 585, "website_link": "https://www.atlasscholar.com"},
    {"provider_id": "brd_016", "name": "Bridge International Students", "price": 299, "website_link": "https://www.bridgeintl.com"},
    {"provider_id": "cmp_017", "name": "CampusCare Essential", "price": 175, "website_link": "https://www.campuscare.org/essential"},
    {"provider_id": "cmp_018", "name": "CampusCare Complete", "price": 640, "website_link": "https://www.campuscare.org/complete"},
    {"provider_id": "evr_019", "name": "Evergreen Student Plan", "price": 400, "website_link": "https://www.evergreenplan.com"},
    {"provider_id": "glb_020", "name": "GlobeTrek Scholar", "price": 255, "website_link": "https://www.globetrek.com/scholar"},
    {"provider_id": "hrz_021", "name": "Horizon Student Health", "price": 499, "website_link": "https://www.horizonstudent.com"},
    {"provider_id": "lib_022", "name": "Liberty Campus Insurance", "price": 725, "website_link": "https://www.libertycampus.com"},
    {"provider_id": "nav_023", "name": "Navigator Study Abroad", "price": 130, "website_link": "https://www.navigatorabroad.com"},
    {"provider_id": "pac_024", "name": "Pacific Scholar Health", "price": 460, "website_link": "https://www.pacificscholar.com"},
    {"provider_id": "qua_025", "name": "Quad Health Student Plan", "price": 375, "website_link": "https://www.quadhealth.com"},
    {"provider_id": "sum_026", "name": "Summit International Care", "price": 535, "website_link": "https://www.summitintlcare.com"},
    {"provider_id": "trv_027", "name": "TravelSafe Student", "price": 195, "website_link": "https://www.travelsafestudent.com"},
    {"provider_id": "vst_028", "name": "Vista Graduate Health", "price": 610, "website_link": "https://www.vistagrad.com"},
    {"provider_id": "wrd_029", "name": "WorldWide Learners Cover", "price": 320, "website_link": "https://www.worldwidelearners.com"},
]
