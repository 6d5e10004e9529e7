# tests/test_validation.py
import unittest

from soc_efficacy.core.exceptions import InputValidationException
from soc_efficacy.models.inputs import (
    AssetDistribution,
    ManpowerInputs,
    OperationsInputs,
    OrgInfo,
)
from soc_efficacy.scoring.maturity import band_label, classify_band, domain_label
from soc_efficacy.models.enumerations import DomainKey, MaturityBand
from soc_efficacy.scoring.validation import (
    ensure_valid,
    validate_coverage_inputs,
    validate_manpower_inputs,
    validate_operations_inputs,
    validate_org_info,
)


class TestQuestionnaireValidation(unittest.TestCase):

    def test_org_info_requires_every_field(self):
        errors = validate_org_info(OrgInfo(name="Acme", entity_type="  "))
        self.assertEqual(len(errors), 3)
        self.assertIn("Please specify the entity type.", errors)

    def test_complete_org_info(self):
        org = OrgInfo(name="Acme", entity_type="Bank", entity_category="Large", period="FY25")
        self.assertEqual(validate_org_info(org), [])

    def test_coverage_needs_at_least_one_asset(self):
        errors = validate_coverage_inputs(AssetDistribution(), {})
        self.assertEqual(len(errors), 1)
        self.assertTrue(errors[0].startswith("Please provide at least one asset count"))

    def test_integrations_may_not_exceed_applicable(self):
        errors = validate_coverage_inputs(AssetDistribution(S1=10), {"pam": 12, "siem": 10})
        self.assertEqual(
            errors,
            ["For PAM, integrated systems (y=12) should not exceed applicable systems (x=10)."],
        )

    def test_integrations_for_inapplicable_technology_not_checked(self):
        errors = validate_coverage_inputs(AssetDistribution(S1=10), {"dlp": 50, "waf": 3})
        self.assertEqual(errors, [])

    def test_operations_totals_required(self):
        errors = validate_operations_inputs(OperationsInputs())
        self.assertEqual(errors, [
            "Please specify the total number of log sources configured for SOC.",
            "Please specify total number of security technologies in scope for operations.",
            "Please specify total number of SIEM / detection use-cases.",
        ])

    def test_operations_single_missing_total(self):
        inputs = OperationsInputs(total_log_sources=10, total_technologies=4)
        self.assertEqual(
            validate_operations_inputs(inputs),
            ["Please specify total number of SIEM / detection use-cases."],
        )

    def test_operations_complete(self):
        inputs = OperationsInputs(total_log_sources=10, total_technologies=4, total_use_cases=20)
        self.assertEqual(validate_operations_inputs(inputs), [])

    def test_manpower_needs_headcount(self):
        self.assertEqual(len(validate_manpower_inputs(ManpowerInputs())), 1)
        self.assertEqual(validate_manpower_inputs(ManpowerInputs(l2_bands=(0, 1, 0))), [])

    def test_ensure_valid_raises_with_messages(self):
        with self.assertRaises(InputValidationException) as ctx:
            ensure_valid(["first", "second"])
        self.assertEqual(ctx.exception.errors, ["first", "second"])

    def test_ensure_valid_passes_empty_list(self):
        ensure_valid([])


class TestMaturityBands(unittest.TestCase):

    def test_band_boundaries(self):
        self.assertEqual(classify_band(39.99), MaturityBand.LOW)
        self.assertEqual(classify_band(40), MaturityBand.MID)
        self.assertEqual(classify_band(69.99), MaturityBand.MID)
        self.assertEqual(classify_band(70), MaturityBand.HIGH)

    def test_scores_above_100_are_high(self):
        self.assertEqual(classify_band(133.3), MaturityBand.HIGH)

    def test_explicit_thresholds(self):
        self.assertEqual(classify_band(55, low_threshold=60, high_threshold=80), MaturityBand.LOW)

    def test_labels(self):
        self.assertEqual(band_label(10), "Low")
        self.assertEqual(band_label(50), "Moderate")
        self.assertEqual(band_label(90), "Strong")
        self.assertEqual(domain_label(DomainKey.GOVERNANCE), "SOC Governance (H)")


if __name__ == "__main__":
    unittest.main()
