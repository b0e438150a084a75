import io
import math
import unittest

from pykvini.ini import IniOptions, IniStore


class TypedAccessorTest(unittest.TestCase):
    def setUp(self):
        self.ini = IniStore()
        self.ini.parse('\n'.join([
            'int=42', 'neg=-7', 'plus=+3', 'word=abc', 'under=4_2',
            'float=3.5', 'exp=1e3', 'YES=YES', 'maybe=maybe', 'off=off',
            'one=1', 'bigT=T', 'upper=TRUE', 'mixed=tRue'
        ]))

    def test_get(self):
        self.assertEqual(self.ini.get('word'), ('abc', True))
        self.assertEqual(self.ini.get('missing'), ('', False))
        self.assertEqual(self.ini.section_get('nosuch', 'word'), ('', False))

    def test_get_int(self):
        self.assertEqual(self.ini.get_int('int'), (42, True))
        self.assertEqual(self.ini.get_int('neg'), (-7, True))
        self.assertEqual(self.ini.get_int('plus'), (3, True))
        self.assertEqual(self.ini.get_int('word'), (0, False))
        self.assertEqual(self.ini.get_int('under'), (0, False))
        self.assertEqual(self.ini.get_int('float'), (0, False))
        self.assertEqual(self.ini.get_int('missing'), (0, False))

    def test_get_float(self):
        self.assertEqual(self.ini.get_float('float'), (3.5, True))
        self.assertEqual(self.ini.get_float('exp'), (1000.0, True))
        self.assertEqual(self.ini.get_float('int'), (42.0, True))
        self.assertEqual(self.ini.get_float('word'), (0.0, False))
        self.assertEqual(self.ini.get_float('under'), (0.0, False))
        self.assertEqual(self.ini.get_float('missing'), (0.0, False))

    def test_get_bool(self):
        self.assertEqual(self.ini.get_bool('YES'), (True, True))
        self.assertEqual(self.ini.get_bool('one'), (True, True))
        self.assertEqual(self.ini.get_bool('bigT'), (True, True))
        self.assertEqual(self.ini.get_bool('upper'), (True, True))
        self.assertEqual(self.ini.get_bool('off'), (False, True))
        self.assertEqual(self.ini.get_bool('maybe'), (False, False))
        self.assertEqual(self.ini.get_bool('mixed'), (False, False))
        self.assertEqual(self.ini.get_bool('int'), (False, False))
        self.assertEqual(self.ini.get_bool('missing'), (False, False))

    def test_setters(self):
        self.ini.set_int('i', 42)
        self.ini.set_float('f', 1.5)
        self.ini.set_bool('t', True)
        self.ini.set_bool('n', False)
        self.ini.set('s', 'text')
        self.assertEqual(self.ini.get('i'), ('42', True))
        self.assertEqual(self.ini.get('f'), ('1.50000000', True))
        self.assertEqual(self.ini.get('t'), ('true', True))
        self.assertEqual(self.ini.get('n'), ('false', True))
        self.assertEqual(self.ini.get('s'), ('text', True))

    def test_section_setters(self):
        self.ini.section_set_int('sec', 'i', -3)
        self.ini.section_set_float('sec', 'f', 0.1)
        self.ini.section_set_bool('sec', 'b', True)
        self.assertEqual(self.ini.section_get_int('sec', 'i'), (-3, True))
        self.assertEqual(self.ini.section_get('sec', 'f'),
                         ('0.10000000', True))
        value, ok = self.ini.section_get_float('sec', 'f')
        self.assertTrue(ok)
        self.assertTrue(math.isclose(value, 0.1))
        self.assertEqual(self.ini.section_get_bool('sec', 'b'), (True, True))

    def test_get_int_range(self):
        self.ini.set('max', '9223372036854775807')
        self.ini.set('min', '-9223372036854775808')
        self.ini.set('over', '9223372036854775808')
        self.ini.set('under', '-9223372036854775809')
        self.assertEqual(self.ini.get_int('max'), ((1 << 63) - 1, True))
        self.assertEqual(self.ini.get_int('min'), (-(1 << 63), True))
        self.assertEqual(self.ini.get_int('over'), (0, False))
        self.assertEqual(self.ini.get_int('under'), (0, False))

    def test_get_float_forms(self):
        self.ini.set('hex', '0x1p4')
        self.ini.set('neghex', '-0X1.8p1')
        self.ini.set('nohexexp', '0x10')
        self.ini.set('huge', '1e999')
        self.ini.set('inf', '-Inf')
        self.assertEqual(self.ini.get_float('hex'), (16.0, True))
        self.assertEqual(self.ini.get_float('neghex'), (-3.0, True))
        self.assertEqual(self.ini.get_float('nohexexp'), (0.0, False))
        self.assertEqual(self.ini.get_float('huge'), (0.0, False))
        self.assertEqual(self.ini.get_float('inf'), (-math.inf, True))

    def test_set_overwrites(self):
        self.ini.set_int('int', 7)
        self.assertEqual(self.ini.get_int('int'), (7, True))


class StoreTest(unittest.TestCase):
    def setUp(self):
        self.ini = IniStore()
        self.ini.set_parse_section(True)
        self.ini.parse('a=1\n[s]\nc=3\nd=4')

    def test_delete(self):
        self.ini.delete('s', 'c')
        self.ini.delete('s', 'd')
        self.assertEqual(self.ini.get_section_map('s'), ({}, True))
        # missing ones are fine
        self.ini.delete('s', 'c')
        self.ini.delete('nosuch', 'c')
        self.assertNotIn('nosuch', self.ini)

    def test_get_section_map_is_copy(self):
        kv, ok = self.ini.get_section_map('s')
        self.assertTrue(ok)
        kv['c'] = 'changed'
        self.assertEqual(self.ini.section_get('s', 'c'), ('3', True))
        self.assertEqual(self.ini.get_section_map('nosuch'), ({}, False))

    def test_get_all_is_copy(self):
        everything = self.ini.get_all()
        everything['s']['c'] = 'changed'
        everything['new'] = {}
        self.assertEqual(self.ini.section_get('s', 'c'), ('3', True))
        self.assertNotIn('new', self.ini)

    def test_header(self):
        self.assertEqual(self.ini.header, {'a': '1'})
        self.assertEqual(IniStore().header, {})

    def test_reset(self):
        self.ini.reset()
        self.assertEqual(len(self.ini), 0)
        self.assertEqual(self.ini.get_all(), {})
        self.assertTrue(self.ini.options.parse_section)
        self.ini.parse('[x]\ny=1')
        self.assertEqual(self.ini.sections(), ['', 'x'])

    def test_options_are_per_instance(self):
        other = IniStore()
        self.assertFalse(other.options.parse_section)
        self.assertIsNot(other.options, IniStore().options)

    def test_shared_options_object(self):
        opts = IniOptions(parse_section=True)
        first, second = IniStore(opts), IniStore(opts)
        first.parse('x:1', '\n', ':')
        first.set_trim_quotes(True)
        self.assertEqual(second.options.kv_sep, '=')
        self.assertFalse(second.options.trim_quotes)
        self.assertEqual(opts, IniOptions(parse_section=True))
        second.set('k', 'v')
        self.assertEqual(second.dumps(), 'k=v\n')

    def test_set_creates_section(self):
        fresh = IniStore()
        fresh.section_set('new', 'k', 'v')
        self.assertEqual(fresh.sections(), ['new'])


class WriteTest(unittest.TestCase):
    def test_default_section_first(self):
        ini = IniStore()
        ini.section_set('s', 'c', '3')
        ini.set('a', '1')
        self.assertEqual(ini.dumps(), 'a=1\n[s]\nc=3\n')

    def test_no_default_section(self):
        ini = IniStore()
        ini.section_set('s', 'c', '3')
        buf = io.StringIO()
        ini.write(buf)
        self.assertEqual(buf.getvalue(), '[s]\nc=3\n')

    def test_empty_section_keeps_header(self):
        ini = IniStore()
        ini.set_parse_section(True)
        ini.parse('[empty]')
        self.assertEqual(ini.dumps(), '[empty]\n')

    def test_round_trip(self):
        src = IniStore(IniOptions(parse_section=True))
        src.parse('a=1\nb = two words\n[s]\nc=3\n[t]\n[u]\nk=v', '\n', '=')
        out = io.StringIO()
        src.write(out)

        back = IniStore(IniOptions(parse_section=True))
        back.parse(out.getvalue())
        self.assertEqual(back.get_all(), src.get_all())

    def test_round_trip_custom_separators(self):
        src = IniStore(IniOptions(parse_section=True))
        src.parse('a: 1|[s]|c :3', '|', ':')
        text = src.dumps()
        self.assertEqual(text, 'a:1|[s]|c:3|')

        back = IniStore(IniOptions(parse_section=True))
        back.parse(text, '|', ':')
        self.assertEqual(back.get_all(), src.get_all())


class ParseStreamTest(unittest.TestCase):
    def test_bytes_stream(self):
        ini = IniStore()
        ini.parse_stream(io.BytesIO(b'a=1\nb=2'))
        self.assertEqual(ini.get_all(), {'': {'a': '1', 'b': '2'}})

    def test_undecodable_bytes_stream(self):
        ini = IniStore()
        ini.parse_stream(io.BytesIO(b'k=M\xfcller'))
        value, ok = ini.get('k')
        self.assertTrue(ok)
        self.assertTrue(value.startswith('M') and value.endswith('ller'))

    def test_text_stream(self):
        ini = IniStore()
        ini.parse_stream(io.StringIO('a->1,b->2'), ',', '->')
        self.assertEqual(ini.get_all(), {'': {'a': '1', 'b': '2'}})


if __name__ == '__main__':
    unittest.main()
