import pytest

from unittest import TestCase

from ..core.error import DuplicateBaseError, UnsupportedBaseError
from ..encoders.rfc4648 import Base16Codec, Base32Codec
from .. import registry as test_module

EXPECTED_CODES = {
    "f": "base16",
    "b": "base32",
    "c": "base32pad",
    "v": "base32hex",
    "t": "base32hexpad",
    "h": "base32z",
    "Z": "base58flickr",
    "z": "base58btc",
    "m": "base64",
    "M": "base64pad",
    "u": "base64url",
    "U": "base64urlpad",
}


class TestCodecTable(TestCase):
    def test_registry_contents(self):
        assert {code: e.name for code, e in test_module.codes.items()} == (
            EXPECTED_CODES
        )
        assert set(test_module.names) == set(EXPECTED_CODES.values())
        assert len(test_module.TABLE) == len(EXPECTED_CODES)

    def test_round_trip(self):
        for name, entry in test_module.names.items():
            assert test_module.TABLE.lookup_by_code(entry.code).name == name
            assert test_module.names[name] is test_module.codes[entry.code]

    def test_codes_unique(self):
        codes = [entry.code for entry in test_module.BASES]
        assert len(codes) == len(set(codes))
        assert all(len(code) == test_module.CODE_LENGTH for code in codes)

    def test_frozen_names(self):
        with pytest.raises(TypeError):
            test_module.names["base1001"] = test_module.names["base16"]
        with pytest.raises(TypeError):
            del test_module.names["base16"]
        assert "base1001" not in test_module.names

    def test_frozen_codes(self):
        with pytest.raises(TypeError):
            test_module.codes["6"] = test_module.codes["f"]
        with pytest.raises(TypeError):
            del test_module.codes["f"]
        assert "6" not in test_module.codes

    def test_entries_immutable(self):
        entry = test_module.names["base16"]
        with pytest.raises(AttributeError):
            entry.code = "6"

    def test_lookup(self):
        table = test_module.TABLE
        assert table.lookup("z").name == "base58btc"
        assert table.lookup(b"Z").name == "base58flickr"
        assert table.lookup("base64url").code == "u"
        assert table.lookup(bytearray(b"base64url")).code == "u"
        entry = test_module.names["base32"]
        assert table.lookup(entry) is entry
        assert "base32" in table
        assert "b" in table
        assert "base1001" not in table

    def test_x_lookup_unsupported(self):
        table = test_module.TABLE
        for identifier in ("base1001", "6", b"6", b"\xff", "zz"):
            with pytest.raises(UnsupportedBaseError):
                table.lookup(identifier)
        with pytest.raises(UnsupportedBaseError):
            table.lookup_by_name("z")
        with pytest.raises(UnsupportedBaseError):
            table.lookup_by_code("base58btc")

    def test_x_lookup_unregistered_entry(self):
        imposter = test_module.BaseEntry("base16", "f", Base16Codec())
        with pytest.raises(UnsupportedBaseError):
            test_module.TABLE.lookup(imposter)

    def test_x_lookup_invalid_type(self):
        with pytest.raises(TypeError):
            test_module.TABLE.lookup(16)

    def test_x_duplicate_code(self):
        with pytest.raises(DuplicateBaseError) as excinfo:
            test_module.CodecTable(
                [
                    test_module.BaseEntry("base32", "b", Base32Codec()),
                    test_module.BaseEntry("base32upper", "b", Base32Codec()),
                ]
            )
        assert "base32upper" in excinfo.value.message

    def test_x_duplicate_name(self):
        with pytest.raises(DuplicateBaseError):
            test_module.CodecTable(
                [
                    test_module.BaseEntry("base32", "b", Base32Codec()),
                    test_module.BaseEntry("base32", "B", Base32Codec()),
                ]
            )

    def test_x_code_length(self):
        with pytest.raises(ValueError):
            test_module.CodecTable(
                [test_module.BaseEntry("base16", "ff", Base16Codec())]
            )

    def test_custom_table(self):
        table = test_module.CodecTable(
            [test_module.BaseEntry("base16", "f", Base16Codec())]
        )
        assert len(table) == 1
        assert [entry.name for entry in table] == ["base16"]
        assert table.by_code["f"] is table.by_name["base16"]


class TestEncoding(TestCase):
    def test_members(self):
        assert {member.name for member in test_module.Encoding} == set(
            test_module.names
        )
        for member in test_module.Encoding:
            assert member.value is test_module.names[member.name]

    def test_from_name_code(self):
        assert test_module.Encoding.from_name("base58btc").code == "z"
        assert test_module.Encoding.from_code("M").name == "base64pad"
        with pytest.raises(UnsupportedBaseError):
            test_module.Encoding.from_name("fancy-encoding")
        with pytest.raises(UnsupportedBaseError):
            test_module.Encoding.from_code("6")
