import unittest
from wordcase import patterns
from wordcase.entities import Convention
from wordcase.errors import InvalidArgumentError
from wordcase.lookups import ConventionData, normalize_alias

class TestConventionData(unittest.TestCase):
    def test_every_member_has_a_record(self):
        data = ConventionData()
        self.assertEqual(sorted(data.name), sorted(member.value for member in Convention))

    def test_alias_lookup_is_normalized(self):
        data = ConventionData()
        self.assertEqual(data.alias_to_name['kebabcase'], 'kebab')
        self.assertEqual(data.alias_to_name['dotcase'], 'dot')
        self.assertEqual(data.alias_to_name['camel'], 'camel')

class TestNormalizeAlias(unittest.TestCase):
    def test_normalize_alias(self):
        self.assertEqual(normalize_alias('dot.case'), 'dotcase')
        self.assertEqual(normalize_alias(' Snake_Case '), 'snakecase')

class TestConvention(unittest.TestCase):
    def test_separators(self):
        self.assertEqual(Convention.CAMEL.separator, '')
        self.assertEqual(Convention.DOT.separator, '.')
        self.assertEqual(Convention.KEBAB.separator, '-')
        self.assertEqual(Convention.SNAKE.separator, '_')

    def test_table_matches_converter_separators(self):
        self.assertEqual(Convention.CAMEL.separator, patterns.CAMEL_SEPARATOR)
        self.assertEqual(Convention.DOT.separator, patterns.DOT_SEPARATOR)
        self.assertEqual(Convention.KEBAB.separator, patterns.KEBAB_SEPARATOR)
        self.assertEqual(Convention.SNAKE.separator, patterns.SNAKE_SEPARATOR)

    def test_labels(self):
        labels = [member.label for member in Convention]
        self.assertEqual(labels, ['camelCase', 'dot.case', 'kebab-case', 'snake_case'])

    def test_aliases(self):
        self.assertIn('dashcase', Convention.KEBAB.aliases)
        self.assertIn('kebab', Convention.KEBAB.aliases)
        self.assertNotIn('snake', Convention.KEBAB.aliases)

class TestLookup(unittest.TestCase):
    def test_lookup_by_name(self):
        self.assertIs(Convention.lookup('camel'), Convention.CAMEL)
        self.assertIs(Convention.lookup('lowerCamelCase'), Convention.CAMEL)
        self.assertIs(Convention.lookup(' Dot.Case '), Convention.DOT)
        self.assertIs(Convention.lookup('lisp-case'), Convention.KEBAB)
        self.assertIs(Convention.lookup('dash'), Convention.KEBAB)
        self.assertIs(Convention.lookup('KEBAB_CASE'), Convention.KEBAB)
        self.assertIs(Convention.lookup('SNAKE_CASE'), Convention.SNAKE)

    def test_lookup_by_member(self):
        self.assertIs(Convention.lookup(Convention.DOT), Convention.DOT)

    def test_unknown_name(self):
        with self.assertRaisesRegex(InvalidArgumentError, "unknown naming convention 'title'"):
            Convention.lookup('title')

    def test_wrong_type(self):
        with self.assertRaisesRegex(InvalidArgumentError, 'expected string but received NoneType'):
            Convention.lookup(None)

if __name__ == '__main__':
    unittest.main()
