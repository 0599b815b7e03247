from __future__ import annotations

import pytest
from pydantic import ValidationError

from apptask.models.containers import Bundle, Container, Intent
from apptask.models.extras import StringExtra


def test_bundle_distinguishes_none_value_from_missing_key():
    bundle = Bundle()
    bundle.put_string("k", None)

    assert bundle.get_string("k") is None
    assert bundle.contains("k") is True
    assert bundle.get_string("other") is None
    assert bundle.contains("other") is False


def test_bundle_reads_non_string_values_as_absent():
    bundle = Bundle({"KP2A_APP_TASK_TYPE": 42})
    assert bundle.get_string("KP2A_APP_TASK_TYPE") is None
    assert bundle.contains("KP2A_APP_TASK_TYPE") is True


def test_intent_creates_extras_lazily():
    intent = Intent("GroupActivity")
    assert intent.extras is None
    assert intent.get_string_extra("k") is None

    intent.put_extra("k", "v")
    assert intent.extras == Bundle({"k": "v"})
    assert intent.get_string("k") == "v"


def test_both_containers_satisfy_container_protocol():
    assert isinstance(Bundle(), Container)
    assert isinstance(Intent("x"), Container)


def test_string_extra_write_overwrites_previous_value():
    bundle = Bundle({"UrlToSearch": "old", "unrelated": "keep"})
    StringExtra(key="UrlToSearch", value="new").write(bundle)

    assert bundle.get_string("UrlToSearch") == "new"
    assert bundle.get_string("unrelated") == "keep"


def test_string_extra_writes_none_as_present_key():
    intent = Intent("x")
    StringExtra(key="CreateEntry_Url", value=None).write(intent)

    assert intent.extras is not None
    assert intent.extras.contains("CreateEntry_Url")
    assert intent.get_string_extra("CreateEntry_Url") is None


def test_string_extra_to_bundle_and_to_intent():
    extra = StringExtra(key="k", value="v")

    bundle = Bundle()
    intent = Intent("x")
    extra.to_bundle(bundle)
    extra.to_intent(intent)

    assert bundle.get_string("k") == "v"
    assert intent.get_string_extra("k") == "v"


def test_string_extra_rejects_empty_key():
    with pytest.raises(ValidationError):
        StringExtra(key="", value="v")
