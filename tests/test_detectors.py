import unittest

from resume_checker.analysis.detectors import (
    COMPLETENESS_DETECTORS,
    has_action_verb,
    has_contact_info,
    has_email,
    has_experience_cue,
    has_phone,
    has_quantified_achievement,
)
from resume_checker.core.scoring import get_scoring_value


class DetectorTests(unittest.TestCase):
    def test_email(self):
        self.assertTrue(has_email("contact: j@x.com"))
        self.assertTrue(has_email("JANE.DOE+CV@Example.ORG"))
        self.assertFalse(has_email("no email here @ all"))

    def test_phone(self):
        self.assertTrue(has_phone("tel 555 555 5555"))
        self.assertTrue(has_phone("call 555.123.4567"))
        self.assertFalse(has_phone("zip 12345"))

    def test_experience_cue(self):
        for text in ("6+ years of Python", "10 years", "Senior engineer", "EXPERIENCED lead"):
            with self.subTest(text=text):
                self.assertTrue(has_experience_cue(text))
        self.assertFalse(has_experience_cue("many years of fun"))

    def test_action_verb_requires_whole_word(self):
        self.assertTrue(has_action_verb("Led a team of five"))
        self.assertTrue(has_action_verb("developed tooling"))
        self.assertFalse(has_action_verb("misled by a develop branch"))

    def test_quantified_achievement(self):
        self.assertTrue(has_quantified_achievement("cut latency by 30%"))
        self.assertTrue(has_quantified_achievement("Improved uptime"))
        self.assertTrue(has_quantified_achievement("REDUCED costs"))
        self.assertFalse(has_quantified_achievement("cut costs"))

    def test_contact_info_accepts_phone_or_email(self):
        self.assertTrue(has_contact_info("555-123-4567"))
        self.assertTrue(has_contact_info("me@site.dev"))
        self.assertFalse(has_contact_info("Jane Doe, Berlin"))

    def test_only_ascii_digits_and_letters_count(self):
        self.assertFalse(has_experience_cue("\u0666 years"))
        self.assertFalse(has_phone("\u0665\u0665\u0665-\u0665\u0665\u0665-\u0665\u0665\u0665\u0665"))
        self.assertFalse(has_quantified_achievement("\u0663\u0660%"))
        self.assertTrue(has_experience_cue("6 years"))

    def test_detectors_treat_none_as_empty(self):
        self.assertFalse(has_email(None))
        self.assertFalse(has_experience_cue(None))

    def test_completeness_detectors_have_configured_weights(self):
        for detector in COMPLETENESS_DETECTORS:
            with self.subTest(detector=detector.name):
                self.assertIsNotNone(get_scoring_value(f"completeness.weights.{detector.name}"))


if __name__ == "__main__":
    unittest.main()
