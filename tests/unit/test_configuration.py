import pytest

from dynconf_lib import Configuration
from dynconf_lib.errors import (
    ConfigurationError,
    DuplicateKeyError,
    MissingKeysError,
    NonNumericValueError,
    StorageNotConfiguredError,
    ValueTooLongError,
)


class RecordingBackend:
    def __init__(self):
        self.store = {}
        self.saved = []
        self.removed = []
        self.requested = []

    def load_all(self):
        return dict(self.store)

    def get(self, key):
        return self.store.get(key)

    def get_multiple(self, keys):
        self.requested.append(list(keys))
        return {k: self.store.get(k) for k in keys}

    def save(self, key, value):
        self.saved.append((key, value))
        self.store[key] = value

    def remove(self, key):
        self.removed.append(key)
        self.store.pop(key, None)


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def config(backend):
    return Configuration(backend)


def test_save_and_get_respects_namespace(config, backend):
    config.save("token", "abc", "gtm")
    assert backend.store == {"gtm__token": "abc"}
    assert config.get("token", "gtm") == "abc"
    assert config.get("token") is None
    assert config.get("token", "other") is None


def test_save_unchanged_value_writes_once(config, backend):
    config.save("token", "abc", "gtm")
    config.save("token", "abc", "gtm")
    assert backend.saved == [("gtm__token", "abc")]
    config.save("token", "def", "gtm")
    assert len(backend.saved) == 2


def test_save_none_removes(config, backend):
    config.save("token", "abc")
    config.save("token", None)
    assert backend.removed == ["token"]
    assert config.get("token") is None


def test_value_length_limit(config, backend):
    config.save("k", "v" * 512)
    assert backend.store["k"] == "v" * 512
    with pytest.raises(ValueTooLongError):
        config.save("k", "v" * 513)
    assert backend.store["k"] == "v" * 512


def test_value_length_counts_characters_not_bytes(config, backend):
    config.save("k", "č" * 512)
    assert backend.store["k"] == "č" * 512


def test_remove_absent_key_is_noop(config, backend):
    config.remove("missing", "ns")
    assert backend.store == {}


def test_get_multiple_with_aliases(config, backend):
    backend.store.update({"ns__a": "1", "ns__b": "2"})
    result = config.get_multiple({"first": "a", 0: "b", "third": "c"}, "ns")
    assert result == {"first": "1", "b": "2", "third": None}
    assert backend.requested == [["ns__a", "ns__b", "ns__c"]]


def test_get_multiple_accepts_sequence(config, backend):
    backend.store["x"] = "1"
    assert config.get_multiple(["x", "y"]) == {"x": "1", "y": None}


def test_get_multiple_duplicate_key(config):
    with pytest.raises(DuplicateKeyError) as exc:
        config.get_multiple({"a": "x", "b": "x"}, "ns")
    message = str(exc.value)
    assert '"ns__x"' in message
    assert '"b"' in message


def test_get_multiple_duplicate_via_combined_key(config):
    # "ns__x" is already combined and resolves to the same storage key as "x"
    with pytest.raises(DuplicateKeyError):
        config.get_multiple(["x", "ns__x"], "ns")


def test_get_multiple_mandatory_success(config, backend):
    backend.store.update({"ns__a": "1", "ns__b": "2"})
    assert config.get_multiple_mandatory({"one": "a", "two": "b"}, "ns") == {"one": "1", "two": "2"}


def test_get_multiple_mandatory_lists_every_missing_key(config, backend):
    backend.store["ns__present"] = "yes"
    with pytest.raises(MissingKeysError) as exc:
        config.get_multiple_mandatory(["missing1", "present", "missing2"], "ns")
    assert exc.value.missing == ["missing1", "missing2"]
    assert exc.value.namespace == "ns"
    message = str(exc.value)
    assert 'keys "missing1", "missing2"' in message
    assert '(in namespace "ns")' in message


def test_get_multiple_mandatory_reports_aliases(config):
    with pytest.raises(MissingKeysError) as exc:
        config.get_multiple_mandatory({"a": "missing1", "b": "missing2"}, "ns")
    assert exc.value.missing == ["a", "b"]


def test_get_multiple_mandatory_single_missing_without_namespace(config):
    with pytest.raises(MissingKeysError) as exc:
        config.get_multiple_mandatory(["only"])
    message = str(exc.value)
    assert 'key "only" missing' in message
    assert "namespace" not in message
    assert isinstance(exc.value, LookupError)


def test_increment_from_absent(config, backend):
    config.increment("counter", 5, "ns")
    assert backend.store["ns__counter"] == "5"
    config.increment("counter", namespace="ns")
    assert backend.store["ns__counter"] == "6"
    config.increment("counter", -10, "ns")
    assert backend.store["ns__counter"] == "-4"


def test_increment_truncates_decimal(config, backend):
    backend.store["ns__ratio"] = "2.9"
    config.increment("ratio", 1, "ns")
    assert backend.store["ns__ratio"] == "3"


def test_increment_by_zero_does_not_rewrite(config, backend):
    backend.store["n"] = "7"
    config.increment("n", 0)
    assert backend.saved == []


def test_increment_non_numeric(config, backend):
    backend.store["ns__counter"] = "abc"
    with pytest.raises(NonNumericValueError) as exc:
        config.increment("counter", 5, "ns")
    assert exc.value.key == "ns__counter"
    assert exc.value.value == "abc"
    assert isinstance(exc.value, TypeError)
    assert backend.store["ns__counter"] == "abc"


def test_load_all_delegates(config, backend):
    backend.store.update({"a__x": "1", "y": "2"})
    assert config.load_all() == {"a__x": "1", "y": "2"}


def test_missing_storage():
    config = Configuration()
    with pytest.raises(StorageNotConfiguredError):
        config.get("anything")
    with pytest.raises(ConfigurationError):
        config.load_all()
