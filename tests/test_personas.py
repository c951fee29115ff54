import logging

import pytest

from macswitch.models import Persona
from macswitch.recommend.personas import detect_persona, get_persona_weights, resolve_persona


class TestPersonaWeights:
    def test_developer(self):
        w = get_persona_weights(Persona.DEVELOPER)
        assert (w.cpu, w.ram, w.storage) == (1.2, 1.3, 1.1)
        assert (w.gpu, w.battery, w.portability) == (0.8, 1.0, 0.9)
        assert "compiling" in w.description

    def test_general_is_neutral(self):
        w = get_persona_weights(Persona.GENERAL)
        assert (w.cpu, w.ram, w.storage, w.gpu, w.battery, w.portability) == (1.0,) * 6

    def test_none_means_general(self):
        assert get_persona_weights(None) == get_persona_weights(Persona.GENERAL)

    def test_tag_string(self):
        assert get_persona_weights("dataanalyst") == get_persona_weights(Persona.DATA_ANALYST)

    def test_every_persona_has_weights(self):
        for persona in Persona:
            assert get_persona_weights(persona).description


class TestParse:
    @pytest.mark.parametrize("value, expected", [
        ("Developer", Persona.DEVELOPER),
        ("developer", Persona.DEVELOPER),
        ("OFFICEWORKER", Persona.OFFICE_WORKER),
        ("office_worker", Persona.OFFICE_WORKER),
        (Persona.STUDENT, Persona.STUDENT),
    ])
    def test_known(self, value, expected):
        assert Persona.parse(value) is expected

    @pytest.mark.parametrize("value", [None, "", "  ", "Pilot"])
    def test_unknown(self, value):
        assert Persona.parse(value) is None


class TestDetectPersona:
    @pytest.mark.parametrize("apps, expected", [
        (["Git", "Google Chrome"], Persona.DEVELOPER),
        (["Adobe Photoshop 2024", "Slack"], Persona.DESIGNER),
        (["Tableau Desktop"], Persona.DATA_ANALYST),
        (["Wireshark"], Persona.IT_ADMIN),
        (["Microsoft Outlook"], Persona.OFFICE_WORKER),
        (["7-Zip"], Persona.GENERAL),
        ([], Persona.GENERAL),
        (None, Persona.GENERAL),
    ])
    def test_detection(self, apps, expected):
        assert detect_persona(apps) is expected

    def test_developer_takes_precedence(self):
        assert detect_persona(["Figma", "Microsoft Teams", "Docker Desktop"]) is Persona.DEVELOPER

    def test_case_insensitive(self):
        assert detect_persona(["JUPYTER NOTEBOOK"]) is Persona.DATA_ANALYST


class TestResolvePersona:
    def test_explicit_wins_over_apps(self):
        assert resolve_persona("designer", ["Git"]) is Persona.DESIGNER

    def test_detected_when_missing(self):
        assert resolve_persona(None, ["Git"]) is Persona.DEVELOPER

    def test_general_without_anything(self):
        assert resolve_persona(None, None) is Persona.GENERAL

    def test_unknown_tag_falls_back_to_detection(self, caplog):
        with caplog.at_level(logging.WARNING, logger="macswitch"):
            assert resolve_persona("unknown", ["Git"]) is Persona.DEVELOPER
        assert "Unknown persona" in caplog.text

    def test_unknown_tag_without_apps(self):
        assert resolve_persona("pilot", []) is Persona.GENERAL
