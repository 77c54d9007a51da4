from unittest.mock import MagicMock

import pytest

from appsamples.gmailsettings import SettingCategory, SettingsDefaults, SettingsRequest, dispatch


def _request(setting: str, **kwargs: object) -> SettingsRequest:
    return SettingsRequest(
        username="admin", password="pw", domain="example.com", setting=setting, **kwargs
    )


@pytest.mark.parametrize(
    "setting, expected",
    [
        ("pop", SettingCategory.POP),
        ("POP3", SettingCategory.POP),
        ("  SeNdAs ", SettingCategory.SENDAS),
        ("labels", SettingCategory.LABEL),
        ("webclips", SettingCategory.WEBCLIP),
        ("signatures", SettingCategory.SIGNATURE),
        ("filter", SettingCategory.FILTER),
    ],
)
def test_match_prefix(setting: str, expected: SettingCategory) -> None:
    assert SettingCategory.match(setting) is expected


@pytest.mark.parametrize("setting", ["", "po", "smtp", "xpop", "send-as"])
def test_match_unknown(setting: str) -> None:
    assert SettingCategory.match(setting) is None


def test_get_support() -> None:
    readable = {c for c in SettingCategory if c.supports_get}
    assert readable == {
        SettingCategory.SENDAS,
        SettingCategory.LABEL,
        SettingCategory.FORWARDING,
        SettingCategory.POP,
        SettingCategory.IMAP,
        SettingCategory.VACATION,
        SettingCategory.SIGNATURE,
    }


def test_write_targets_destination_user() -> None:
    svc = MagicMock()
    request = _request("label", destination_user="joe")

    lines = dispatch.run(svc, SettingCategory.LABEL, request, SettingsDefaults(label="Team"))

    assert lines == []
    svc.create_label.assert_called_once_with(["joe"], "Team")


def test_write_defaults_to_own_account() -> None:
    svc = MagicMock()

    dispatch.run(svc, SettingCategory.LANGUAGE, _request("language"), SettingsDefaults())

    svc.change_language.assert_called_once_with(["admin"], "en-US")


def test_disable_flips_enable_switch() -> None:
    svc = MagicMock()
    request = _request("forwarding", destination_user="joe", is_enabled=False)

    dispatch.run(svc, SettingCategory.FORWARDING, request, SettingsDefaults())

    svc.change_forwarding.assert_called_once_with(
        ["joe"], False, "archive@example.com", "KEEP"
    )


def test_filter_write_uses_defaults() -> None:
    svc = MagicMock()
    d = SettingsDefaults()

    dispatch.run(svc, SettingCategory.FILTER, _request("filter", destination_user="joe"), d)

    args = svc.create_filter.call_args.args
    assert args[0] == ["joe"]
    assert args[1] == d.filter_from
    assert args[-1] == d.filter_label


def test_get_unsupported_raises() -> None:
    svc = MagicMock()
    request = _request("general", destination_user="joe", is_get=True)

    with pytest.raises(ValueError, match="not supported"):
        dispatch.run(svc, SettingCategory.GENERAL, request, SettingsDefaults())
    svc.assert_not_called()


def test_get_sendas_numbered_blocks() -> None:
    svc = MagicMock()
    svc.retrieve_send_as.return_value = [
        {"name": "Sales", "address": "sales@example.com"},
        {"name": "Support", "address": "help@example.com"},
    ]
    request = _request("sendas", destination_user="joe", is_get=True)

    lines = dispatch.run(svc, SettingCategory.SENDAS, request, SettingsDefaults())

    assert lines == [
        "sendAs setting 1:",
        "\tname: Sales",
        "\taddress: sales@example.com",
        "sendAs setting 2:",
        "\tname: Support",
        "\taddress: help@example.com",
    ]
    svc.retrieve_send_as.assert_called_once_with("joe")


def test_get_signature() -> None:
    svc = MagicMock()
    svc.retrieve_signature.return_value = "-- Joe"
    request = _request("signature", destination_user="joe", is_get=True)

    lines = dispatch.run(svc, SettingCategory.SIGNATURE, request, SettingsDefaults())

    assert lines == ["signature:", "\tvalue: -- Joe"]


def test_format_numbered_empty() -> None:
    assert dispatch.format_numbered("label", []) == []
