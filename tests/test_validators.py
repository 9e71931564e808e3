import unittest

from clock_app.utils.validators import validate_timezone_param


class ValidateTimezoneParamTests(unittest.TestCase):
    def test_missing_or_empty_parameter_is_valid(self):
        self.assertEqual(validate_timezone_param(None), (None, []))
        self.assertEqual(validate_timezone_param(''), ('', []))

    def test_valid_parameter_is_normalized(self):
        self.assertEqual(validate_timezone_param('UTC 3'), ('UTC+3', []))
        self.assertEqual(validate_timezone_param('Asia/Tokyo'), ('Asia/Tokyo', []))

    def test_invalid_parameter_reports_error(self):
        timezone, errors = validate_timezone_param('Not/AZone')

        self.assertEqual(timezone, 'Not/AZone')
        self.assertEqual(len(errors), 1)
        self.assertTrue(errors[0].startswith('Invalid timezone'))

    def test_malformed_offset_reports_reason(self):
        _, errors = validate_timezone_param('UTC 99')

        self.assertEqual(errors, ['Invalid timezone: offset out of range.'])


if __name__ == '__main__':
    unittest.main()
