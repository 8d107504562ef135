"""Unit tests for krabby.pokemon – records and payload decoding."""
import json
import pytest
from krabby.errors import DatabaseLoadError, InvalidPokemonFormError
from krabby.forms import GMAX, MEGA, MEGA_X, REGULAR, Form
from krabby.pokemon import Pokemon, decode_pokemon


def _record(**overrides):
    record = {"slug": "test", "gen": 1, "name": {"en": "Test"}, "desc": {}, "forms": []}
    record.update(overrides)
    return record


def _payload(*records):
    return json.dumps(list(records)).encode("utf-8")


@pytest.fixture
def pokemon():
    return Pokemon(slug="test", gen=1, name={}, desc={}, forms=(MEGA, GMAX))


class TestPokemon:
    def test_filtered_forms(self, pokemon):
        assert pokemon.filtered_forms([MEGA]) == [GMAX]
        assert pokemon.filtered_forms([Form.other("unknown")]) == [MEGA, GMAX]

    def test_form_slug(self, pokemon):
        assert pokemon.form_slug(REGULAR) == "test"
        assert pokemon.form_slug(MEGA) == "test-mega"

    def test_form_slug_unknown_form(self, pokemon):
        with pytest.raises(InvalidPokemonFormError) as exc:
            pokemon.form_slug(Form.other("nonexistant"))
        assert (exc.value.slug, exc.value.form) == ("test", "nonexistant")

    def test_has_form(self, pokemon):
        assert pokemon.has_form(REGULAR)
        assert pokemon.has_form(GMAX)
        assert not pokemon.has_form(MEGA_X)

    def test_frozen(self, pokemon):
        with pytest.raises(AttributeError):
            pokemon.slug = "other"

    def test_hashable_with_read_only_maps(self):
        (p,) = decode_pokemon(_payload(_record(name={"en": "Test"}, desc={"en": "Desc"})))
        assert hash(p) == hash(p)
        assert p in {p}


class TestDecode:
    def test_preserves_order(self):
        records = decode_pokemon(_payload(_record(slug="b"), _record(slug="a")))
        assert [p.slug for p in records] == ["b", "a"]

    def test_fields(self):
        (p,) = decode_pokemon(_payload(_record(
            gen=3, name={"en": "Groudon", "fr": "Groudon"},
            desc={"en": "Land."}, forms=["primal"],
        )))
        assert p.gen == 3
        assert p.localized_name("fr") == "Groudon"
        assert p.localized_desc("en") == "Land."
        assert p.localized_desc("de") is None
        assert p.forms == (Form.other("primal"),)

    def test_maps_are_read_only(self):
        (p,) = decode_pokemon(_payload(_record()))
        with pytest.raises(TypeError):
            p.name["en"] = "Changed"

    def test_regular_in_forms_is_dropped(self):
        (p,) = decode_pokemon(_payload(_record(forms=["regular", "mega"])))
        assert p.forms == (MEGA,)

    def test_empty_array(self):
        assert decode_pokemon(b"[]") == []

    @pytest.mark.parametrize("payload", [
        b"\xff\xfe",
        b"{not json",
        b'{"slug": "x"}',
        b"[1]",
    ])
    def test_malformed_payload(self, payload):
        with pytest.raises(DatabaseLoadError):
            decode_pokemon(payload)

    @pytest.mark.parametrize("overrides", [
        {"slug": ""},
        {"slug": 12},
        {"gen": 0},
        {"gen": 10},
        {"gen": "1"},
        {"gen": True},
        {"name": ["Test"]},
        {"name": {"en": 1}},
        {"desc": None},
        {"forms": "mega"},
        {"forms": [1]},
        {"forms": ["mega", "mega"]},
    ])
    def test_invalid_records(self, overrides):
        with pytest.raises(DatabaseLoadError):
            decode_pokemon(_payload(_record(**overrides)))

    def test_missing_key(self):
        record = _record()
        del record["desc"]
        with pytest.raises(DatabaseLoadError, match="missing desc"):
            decode_pokemon(_payload(record))

    def test_duplicate_slug(self):
        with pytest.raises(DatabaseLoadError, match="duplicate slug"):
            decode_pokemon(_payload(_record(), _record()))
