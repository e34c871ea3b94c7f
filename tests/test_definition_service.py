import requests

from worsd.services.definition_service import DefinitionService

PAYLOAD = [
    {
        "word": "crane",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "A large, long-necked bird.", "synonyms": []},
                    {"definition": "A machine for lifting heavy objects."},
                ],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [{"definition": "To stretch out one's neck."}, {"example": "no text"}],
            },
        ],
    },
    {"word": "crane", "meanings": [{"definitions": [{"definition": "Ignored second entry."}]}]},
]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.json_error:
            raise self.json_error
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error:
            raise self.error
        return self.response


def test_lookup_flattens_first_entry_definitions():
    session = FakeSession(FakeResponse(PAYLOAD))
    service = DefinitionService(timeout=2.5, session=session)

    assert service.lookup("crane") == [
        "A large, long-necked bird.",
        "A machine for lifting heavy objects.",
        "To stretch out one's neck.",
    ]
    assert session.calls == [("https://api.dictionaryapi.dev/api/v2/entries/en/crane", 2.5)]


def test_lookup_network_error_returns_none():
    session = FakeSession(error=requests.ConnectionError("offline"))
    assert DefinitionService(session=session).lookup("crane") is None


def test_lookup_timeout_returns_none():
    session = FakeSession(error=requests.Timeout("slow"))
    assert DefinitionService(session=session).lookup("crane") is None


def test_lookup_http_error_returns_none():
    session = FakeSession(FakeResponse({"title": "No Definitions Found"}, status_code=404))
    assert DefinitionService(session=session).lookup("worsd") is None


def test_lookup_bad_json_returns_none():
    session = FakeSession(FakeResponse(json_error=ValueError("not json")))
    assert DefinitionService(session=session).lookup("crane") is None


def test_lookup_unexpected_shape_returns_none():
    for payload in ({"meanings": []}, [], ["crane"], [{"meanings": "none"}]):
        session = FakeSession(FakeResponse(payload))
        assert DefinitionService(session=session).lookup("crane") is None


def test_lookup_uses_requests_by_default(monkeypatch):
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return FakeResponse(PAYLOAD)

    monkeypatch.setattr(requests, "get", fake_get)
    assert len(DefinitionService().lookup("crane")) == 3
    assert calls == ["https://api.dictionaryapi.dev/api/v2/entries/en/crane"]
