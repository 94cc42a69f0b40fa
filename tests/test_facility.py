import pytest

from settlesim.facility import Facility, FacilityCategory, FacilityStatus, FacilityType


@pytest.fixture
def school_type():
    return FacilityType("school", FacilityCategory.LIFE_QUALITY, 3, 2, 1, 1)


def test_from_type_copies_fields(school_type):
    facility = Facility.from_type(school_type, "KfarSPL")
    assert facility.name == school_type.name
    assert facility.category == school_type.category
    assert facility.price == school_type.price
    assert facility.life_quality_score == school_type.life_quality_score
    assert facility.economy_score == school_type.economy_score
    assert facility.environment_score == school_type.environment_score
    assert facility.settlement_name == "KfarSPL"


def test_new_facility_is_under_construction_for_price_steps(school_type):
    facility = Facility.from_type(school_type, "KfarSPL")
    assert facility.status is FacilityStatus.UNDER_CONSTRUCTIONS
    assert facility.time_left == school_type.price


def test_becomes_operational_after_price_steps(school_type):
    facility = Facility.from_type(school_type, "KfarSPL")
    statuses = [facility.step() for _ in range(school_type.price)]
    assert statuses[:-1] == [FacilityStatus.UNDER_CONSTRUCTIONS] * (school_type.price - 1)
    assert statuses[-1] is FacilityStatus.OPERATIONAL
    assert facility.time_left == 0


def test_step_with_negative_time_left_raises():
    facility = Facility("free", FacilityCategory.ECONOMY, 0, 0, 0, 0, settlement_name="A")
    facility.step()
    assert facility.time_left < 0
    with pytest.raises(ValueError):
        facility.step()


def test_copy_is_independent(school_type):
    facility = Facility.from_type(school_type, "KfarSPL")
    facility.step()
    clone = facility.copy()
    assert clone == facility
    clone.step()
    assert facility.time_left == school_type.price - 1
    assert clone.time_left == school_type.price - 2


def test_category_from_config_number():
    assert FacilityCategory(0) is FacilityCategory.LIFE_QUALITY
    assert FacilityCategory(1) is FacilityCategory.ECONOMY
    assert FacilityCategory(2) is FacilityCategory.ENVIRONMENT


def test_status_names_match_report_format(school_type):
    facility = Facility.from_type(school_type, "KfarSPL")
    assert facility.status.name == "UNDER_CONSTRUCTIONS"
    for _ in range(school_type.price):
        facility.step()
    assert facility.status.name == "OPERATIONAL"


def test_str_concatenates_scores(school_type):
    facility = Facility.from_type(school_type, "KfarSPL")
    assert str(facility) == "school 0 3211"