"""Testes para api.payload_builders.beehiiv.

Cobre: filters (achatamento e active_filters), custom_fields
(mapeamento canônico) e subscription (payload completo).
"""

from __future__ import annotations

import pytest

from api.normalizers.signup import normalize_submission
from api.payload_builders.beehiiv import (
    SubscriptionPayloadBuilder,
    category_field_name,
    flatten_filters,
    map_to_custom_fields,
    to_custom_field_list,
)
from app.protocols.models import SalaryBand, SubmissionRecord

BOOLEAN_FIELDS = ("asap_mode_enabled", "instant_alerts", "hourly_alerts", "high_salary_only")
FILTER_FIELDS = (
    "location_pref",
    "employment_type",
    "experience_level",
    "job_roles",
    "job_category",
    "benefits_pref",
    "technologies_pref",
    "industries_pref",
    "languages",
    "company_sizes_pref",
)


class TestCategoryFieldName:
    """Testes para category_field_name."""

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            ("locations", "location_pref"),
            ("employment", "employment_type"),
            ("experience", "experience_level"),
            ("jobRoles", "job_roles"),
            ("jobCategories", "job_category"),
            ("benefits", "benefits_pref"),
            ("technologies", "technologies_pref"),
            ("industries", "industries_pref"),
            ("languages", "languages"),
            ("companySizes", "company_sizes_pref"),
        ],
    )
    def test_known_categories_use_contract_names(self, category: str, expected: str) -> None:
        assert category_field_name(category) == expected

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            ("remotePolicy", "remote_policy_pref"),
            ("visa", "visa_pref"),
            ("work-style", "work_style_pref"),
        ],
    )
    def test_unknown_categories_are_snake_cased(self, category: str, expected: str) -> None:
        assert category_field_name(category) == expected


class TestFlattenFilters:
    """Testes para flatten_filters."""

    def test_joins_values_with_pipe_separator(self) -> None:
        flattened = flatten_filters({"locations": ["NYC", "Remote"]})

        assert flattened.values == {"location_pref": "NYC | Remote"}
        assert flattened.active == ("locations",)
        assert flattened.active_filters == "locations"

    def test_empty_and_absent_categories_are_excluded(self) -> None:
        flattened = flatten_filters({"locations": [], "benefits": ["  "], "technologies": ["Go"]})

        assert flattened.values == {"technologies_pref": "Go"}
        assert flattened.active_filters == "technologies"

    def test_no_active_categories(self) -> None:
        flattened = flatten_filters({"locations": []})

        assert flattened.values == {}
        assert flattened.active_filters == ""

    def test_known_categories_follow_declaration_order(self) -> None:
        """Ordem não depende da ordem de entrada para categorias conhecidas."""
        flattened = flatten_filters(
            {
                "companySizes": ["Startup"],
                "visa": ["H1B"],
                "locations": ["Remote"],
                "jobRoles": ["Backend"],
            }
        )

        assert flattened.active == ("locations", "jobRoles", "companySizes", "visa")
        assert flattened.active_filters == "locations,jobRoles,companySizes,visa"
        assert list(flattened.values) == [
            "location_pref",
            "job_roles",
            "company_sizes_pref",
            "visa_pref",
        ]

    def test_colliding_unknown_category_stays_active_without_overwriting(self) -> None:
        flattened = flatten_filters({"locations": ["NYC"], "location": ["LA"]})

        assert flattened.values == {"location_pref": "NYC"}
        assert flattened.active == ("locations", "location")
        assert flattened.active_filters == "locations,location"

    def test_unnameable_category_stays_active(self) -> None:
        flattened = flatten_filters({"---": ["x"]})

        assert flattened.values == {}
        assert flattened.active_filters == "---"


class TestMapToCustomFields:
    """Testes para map_to_custom_fields."""

    def test_reference_scenario(self) -> None:
        record = normalize_submission(
            {
                "email": "a@b.com",
                "firstName": "Ann",
                "filters": {"locations": ["NYC", "Remote"]},
                "highSalaryOnly": True,
            }
        )

        fields = map_to_custom_fields(record)

        assert fields["first_name"] == "Ann"
        assert fields["location_pref"] == "NYC | Remote"
        assert fields["active_filters"] == "locations"
        assert fields["high_salary_only"] == "true"
        assert [name for name in FILTER_FIELDS if name in fields] == ["location_pref"]

    def test_boolean_fields_are_never_omitted(self) -> None:
        fields = map_to_custom_fields(SubmissionRecord(email="a@b.com"))

        assert fields == {name: "false" for name in BOOLEAN_FIELDS}

    def test_boolean_fields_render_true(self) -> None:
        record = SubmissionRecord(
            email="a@b.com",
            asap_mode_enabled=True,
            instant_alerts=True,
            hourly_alerts=True,
            high_salary_only=True,
        )

        fields = map_to_custom_fields(record)

        assert all(fields[name] == "true" for name in BOOLEAN_FIELDS)

    def test_empty_strings_are_omitted(self) -> None:
        record = SubmissionRecord(email="a@b.com", first_name="  ", frequency="", search_term=" ")

        fields = map_to_custom_fields(record)

        assert "first_name" not in fields
        assert "frequency" not in fields
        assert "search_term" not in fields
        assert "active_filters" not in fields

    def test_salary_band_numbers_and_currency(self) -> None:
        record = SubmissionRecord(
            email="a@b.com",
            salary_band=SalaryBand(min=90000, max=120000.0, currency="USD"),
        )

        fields = map_to_custom_fields(record)

        assert fields["salary_band_min"] == "90000"
        assert fields["salary_band_max"] == "120000"
        assert fields["salary_band_currency"] == "USD"

    def test_salary_band_keeps_fractional_values(self) -> None:
        fields = map_to_custom_fields(
            SubmissionRecord(email="a@b.com", salary_band=SalaryBand(min=45.5))
        )

        assert fields["salary_band_min"] == "45.5"
        assert "salary_band_max" not in fields
        assert "salary_band_currency" not in fields

    def test_canonical_field_order(self) -> None:
        record = normalize_submission(
            {
                "email": "a@b.com",
                "firstName": "Ann",
                "countryOfResidence": "US",
                "timezone": "UTC",
                "sendWindow": "morning",
                "alertsPlan": "pro",
                "frequency": "daily",
                "urgency": "open_to_offers",
                "excludeKeywords": "intern",
                "filters": {"technologies": ["Python"], "locations": ["NYC"]},
                "salaryBand": {"min": 1, "max": 2, "currency": "USD"},
                "searchTerm": "backend",
            }
        )

        assert list(map_to_custom_fields(record)) == [
            "first_name",
            "country_of_residence",
            "timezone",
            "send_window",
            "alerts_plan",
            "asap_mode_enabled",
            "instant_alerts",
            "hourly_alerts",
            "high_salary_only",
            "frequency",
            "urgency",
            "exclude_keywords",
            "active_filters",
            "location_pref",
            "technologies_pref",
            "salary_band_min",
            "salary_band_max",
            "salary_band_currency",
            "search_term",
        ]

    def test_mapping_is_deterministic(self) -> None:
        payload = {
            "email": "a@b.com",
            "filters": {"visa": ["H1B"], "benefits": ["Equity", "401k"], "locations": ["NYC"]},
            "instantAlerts": True,
        }

        first = map_to_custom_fields(normalize_submission(payload))
        second = map_to_custom_fields(normalize_submission(payload))

        assert list(first.items()) == list(second.items())

    def test_all_values_are_strings(self) -> None:
        record = normalize_submission(
            {
                "email": "a@b.com",
                "hourlyAlerts": 1,
                "salaryBand": {"min": 10, "max": 20},
                "filters": {"experience": ["Senior"]},
            }
        )

        assert all(isinstance(value, str) and value for value in map_to_custom_fields(record).values())


class TestSubscriptionPayloadBuilder:
    """Testes para SubscriptionPayloadBuilder."""

    def test_to_custom_field_list(self) -> None:
        assert to_custom_field_list({"first_name": "Ann", "high_salary_only": "true"}) == [
            {"name": "first_name", "value": "Ann"},
            {"name": "high_salary_only", "value": "true"},
        ]

    def test_build_payload_with_policy_constants(self) -> None:
        record = SubmissionRecord(email=" a@b.com ", first_name="Ann")

        payload = SubscriptionPayloadBuilder().build(record).to_dict()

        assert payload["email"] == "a@b.com"
        assert payload["reactivate_existing"] is True
        assert payload["send_welcome_email"] is True
        assert payload["utm_source"] == "asap-jobs-landing"
        assert {"name": "first_name", "value": "Ann"} in payload["custom_fields"]

    def test_build_payload_with_custom_utm_source(self) -> None:
        payload = SubscriptionPayloadBuilder(utm_source="spring-campaign").build(
            SubmissionRecord(email="a@b.com")
        )

        assert payload.utm_source == "spring-campaign"
