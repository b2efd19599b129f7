"""Tests for course_rankings.presentation module."""

from course_rankings.presentation import (
    consensus_label,
    course_label,
    detail_sections,
    location_label,
    matches_filter,
    rating_label,
    render_cells,
)

PINE_VALLEY = {
    "id": "c001",
    "club_name": "Pine Valley Golf Club",
    "course_name": "",
    "city": "Pine Valley",
    "state_or_region": "NJ",
    "country": "USA",
    "golf_digest_country_rating": "1",
    "golf_mag_country_rating": "1",
    "consensus_ranking": 1,
    "designer": "George Crump",
    "year_built": "1918",
    "access": "Private",
    "redesigns": None,
    "restorations": "Tom Fazio (2000s)",
    "description": None,
}


def test_course_label_with_and_without_course_name():
    assert course_label(PINE_VALLEY) == "Pine Valley Golf Club"
    assert course_label({"club_name": "Oakmont", "course_name": "East"}) == "Oakmont (East)"


def test_location_label():
    assert location_label(PINE_VALLEY) == "Pine Valley, NJ"
    assert location_label({"city": "", "state_or_region": "NY"}) == "NY"
    assert location_label({}) == ""


def test_rating_and_consensus_labels():
    assert rating_label("12") == "12"
    assert rating_label(None) == "N/A"
    assert rating_label("") == "N/A"
    assert rating_label(0) == "N/A"
    assert consensus_label(4.5) == "4.5"
    assert consensus_label(10) == "10.0"
    assert consensus_label(0) == "N/A"


def test_render_cells():
    cells = render_cells(PINE_VALLEY)
    assert cells == {
        "club_name": "Pine Valley Golf Club",
        "city": "Pine Valley, NJ",
        "golf_digest_country_rating": "1",
        "golf_mag_country_rating": "1",
        "consensus_ranking": "1.0",
    }


def test_matches_filter_case_insensitive_substring():
    assert matches_filter(PINE_VALLEY, "pine")
    assert matches_filter(PINE_VALLEY, "  VALLEY golf ")
    assert matches_filter(PINE_VALLEY, "nj")
    assert not matches_filter(PINE_VALLEY, "oakmont")


def test_matches_filter_empty_matches_everything():
    assert matches_filter(PINE_VALLEY, "")
    assert matches_filter(PINE_VALLEY, "   ")
    assert matches_filter(PINE_VALLEY, None)


def test_matches_filter_ignores_detail_only_fields():
    # Designer is only visible in the expanded row
    assert not matches_filter(PINE_VALLEY, "crump")


def test_detail_sections_skip_empty_optional_sections():
    sections = detail_sections(PINE_VALLEY)
    titles = [title for title, _ in sections]
    assert titles == ["Course Details", "Location", "Modifications"]
    assert sections[0][1] == [("Designer", "George Crump"), ("Year Built", "1918"), ("Access", "Private")]
    assert sections[2][1] == [("Restorations", "Tom Fazio (2000s)")]


def test_detail_sections_na_and_description():
    sections = detail_sections({"club_name": "X", "description": "Links course."})
    assert sections[0][1] == [("Designer", "N/A"), ("Year Built", "N/A"), ("Access", "N/A")]
    assert sections[-1] == ("Description", [("", "Links course.")])
