from party_services.services.billing import BILLING_TERMS_ENDPOINT, UNAVAILABLE_MESSAGE, list_billing_terms


def test_success_returns_backend_items(bridge, messages):
    bridge.respond(
        "GET",
        BILLING_TERMS_ENDPOINT,
        200,
        {"items": [{"billingTermsId": "NET15", "code": "NET15", "description": "Net 15 Days", "active": True}]},
    )

    output = list_billing_terms(bridge, {}, messages)

    assert output["items"] == [{"billingTermsId": "NET15", "code": "NET15", "description": "Net 15 Days", "active": True}]
    assert bridge.calls[0].query_params == {"activeOnly": True}
    assert messages.messages == []


def test_malformed_term_is_skipped_not_the_whole_list(bridge, messages):
    valid = {"billingTermsId": "NET15", "code": "NET15", "description": "Net 15 Days", "active": True}
    bridge.respond("GET", BILLING_TERMS_ENDPOINT, 200, {"items": [valid, {"billingTermsId": "NET45"}]})

    output = list_billing_terms(bridge, {}, messages)

    assert output["items"] == [valid]
    assert messages.messages == []


def test_active_only_false_is_honoured(bridge, messages):
    list_billing_terms(bridge, {"activeOnly": "false"}, messages)
    assert bridge.calls[0].query_params == {"activeOnly": False}


def test_not_implemented_returns_standard_catalog(bridge, messages):
    output = list_billing_terms(bridge, {}, messages)

    items = output["items"]
    assert [item["billingTermsId"] for item in items] == ["NET30", "NET60", "COD", "PREPAY"]
    assert all(item["active"] is True for item in items)
    assert messages.errors == []
    assert messages.messages == []


def test_transport_fault_returns_net30_only(bridge, messages):
    bridge.fail("GET", BILLING_TERMS_ENDPOINT)

    output = list_billing_terms(bridge, {}, messages)

    assert output["items"] == [
        {"billingTermsId": "NET30", "code": "NET30", "description": "Net 30 Days", "active": True}
    ]
    assert messages.errors == []
    assert messages.messages == [UNAVAILABLE_MESSAGE]


def test_other_failure_returns_net30_only(bridge, messages):
    bridge.respond("GET", BILLING_TERMS_ENDPOINT, 500)

    output = list_billing_terms(bridge, {}, messages)

    assert [item["code"] for item in output["items"]] == ["NET30"]
    assert messages.messages == [UNAVAILABLE_MESSAGE]
