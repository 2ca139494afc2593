import unittest
from wordcase import keys

class TestConvertKeys(unittest.TestCase):
    def test_nested_dicts(self):
        payload = {'user_id': 1, 'Home Address': {'zip-code': '04101'}}
        result = keys.convert_keys(payload, 'camel')
        self.assertEqual(result, {'userId': 1, 'homeAddress': {'zipCode': '04101'}})

    def test_dicts_inside_lists_and_tuples(self):
        payload = [{'First Name': 'Ada'}, ({'Last Name': 'Lovelace'},)]
        result = keys.convert_keys(payload, 'snake')
        self.assertEqual(result, [{'first_name': 'Ada'}, ({'last_name': 'Lovelace'},)])

    def test_values_are_not_converted(self):
        result = keys.convert_keys({'SCREEN_NAME': 'SCREEN_NAME'}, 'dot')
        self.assertEqual(result, {'screen.name': 'SCREEN_NAME'})

    def test_colliding_keys(self):
        payload = {'user id': 1, 'USER_ID': 2}
        with self.assertLogs('wordcase.keys', level='WARNING'):
            with self.assertRaisesRegex(ValueError, "'user_id'"):
                keys.convert_keys(payload, 'snake')

    def test_colliding_keys_in_nested_dict(self):
        payload = [{'ok': {'First Name': 'Ada', 'first_name': 'Ada'}}]
        with self.assertRaises(ValueError):
            keys.convert_keys(payload, 'camel')

    def test_non_string_keys_are_kept(self):
        result = keys.convert_keys({1: {'USER_ID': 2}}, 'kebab')
        self.assertEqual(result, {1: {'user-id': 2}})

    def test_scalars_are_returned_unmodified(self):
        self.assertEqual(keys.convert_keys('USER_ID', 'kebab'), 'USER_ID')
        self.assertEqual(keys.convert_keys(None, 'kebab'), None)

    def test_input_is_not_mutated(self):
        payload = {'user_id': [{'first name': 'Ada'}]}
        keys.convert_keys(payload, 'camel')
        self.assertEqual(payload, {'user_id': [{'first name': 'Ada'}]})

if __name__ == '__main__':
    unittest.main()
