import re

from party_services.services.parties import (
    DUPLICATE_CHECK_ENDPOINT,
    PLACEHOLDER_LEGAL_NAME,
    SEARCH_ENDPOINT,
    check_duplicate_parties,
    get_party,
    search_parties,
)

PARTY_P1 = "/v1/crm/accounts/parties/P-1"


# -- fetch --

def test_get_party_success_stores_full_record(bridge, messages):
    record = {"partyId": "P-1", "legalName": "Acme Inc", "status": "ACTIVE", "contacts": []}
    bridge.respond("GET", PARTY_P1, 200, record)

    output = get_party(bridge, {"partyId": "P-1"}, messages)

    assert output["party"] == record
    assert messages.errors == []


def test_get_party_merged_redirect(bridge, messages):
    bridge.respond("GET", PARTY_P1, 409, {"errorCode": "PARTY_MERGED", "mergedToPartyId": "P-2"})

    output = get_party(bridge, {"partyId": "P-1"}, messages)

    assert output == {"party": None, "errorCode": "PARTY_MERGED", "mergedToPartyId": "P-2"}
    assert messages.errors == []


def test_get_party_not_found_and_forbidden_set_error_code(bridge, messages):
    bridge.respond("GET", PARTY_P1, 404)
    bridge.respond("GET", "/v1/crm/accounts/parties/P-3", 403)

    assert get_party(bridge, {"partyId": "P-1"}, messages)["errorCode"] == "NOT_FOUND"
    assert get_party(bridge, {"partyId": "P-3"}, messages)["errorCode"] == "FORBIDDEN"


def test_get_party_not_implemented_synthesizes_placeholder(bridge, messages):
    output = get_party(bridge, {"partyId": "P-77"}, messages)

    party = output["party"]
    assert party["partyId"] == "P-77"
    assert party["status"] == "ACTIVE"
    assert party["legalName"] == PLACEHOLDER_LEGAL_NAME
    assert party["partyType"] == "ORGANIZATION"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", party["createdAt"])
    assert messages.errors == []


def test_get_party_other_failure_surfaces_message(bridge, messages):
    bridge.respond("GET", PARTY_P1, 500, {"message": "backend exploded"})
    output = get_party(bridge, {"partyId": "P-1"}, messages)

    assert output["party"] is None
    assert messages.errors == ["Unable to retrieve party: backend exploded"]


def test_get_party_requires_party_id(bridge, messages):
    output = get_party(bridge, {}, messages)

    assert output == {"party": None}
    assert bridge.calls == []
    assert messages.errors == ["partyId is required"]


def test_get_party_transport_fault(bridge, messages):
    bridge.fail("GET", PARTY_P1, "connection reset")
    get_party(bridge, {"partyId": "P-1"}, messages)
    assert messages.errors == ["System error: connection reset"]


def test_get_party_validation_failure_surfaces_backend_message(bridge, messages):
    bridge.respond("GET", PARTY_P1, 400, {"message": "bad id"})
    output = get_party(bridge, {"partyId": "P-1"}, messages)

    assert output == {"party": None}
    assert messages.errors == ["Unable to retrieve party: bad id"]


def test_get_party_forbidden_with_message_still_sets_error_code(bridge, messages):
    bridge.respond("GET", PARTY_P1, 403, {"message": "not your party"})
    output = get_party(bridge, {"partyId": "P-1"}, messages)

    assert output == {"party": None, "errorCode": "FORBIDDEN"}
    assert messages.errors == []


def test_get_party_escapes_party_id_in_path(bridge, messages):
    bridge.respond("GET", "/v1/crm/accounts/parties/a%2Fb%3Fx", 200, {"partyId": "a/b?x"})
    output = get_party(bridge, {"partyId": "a/b?x"}, messages)

    assert bridge.calls[0].endpoint == "/v1/crm/accounts/parties/a%2Fb%3Fx"
    assert output["party"] == {"partyId": "a/b?x"}


# -- search --

def test_search_without_criteria_short_circuits(bridge, messages):
    output = search_parties(bridge, {"name": "", "email": None, "partyType": "ORGANIZATION"}, messages)

    assert bridge.calls == []
    assert output["results"] == []
    assert output["totalCount"] == 0
    assert messages.errors == ["At least one search criterion is required"]


def test_search_payload_defaults_and_filters(bridge, messages):
    search_parties(bridge, {"name": "Acme", "status": "ACTIVE", "includeMerged": True}, messages)

    assert bridge.calls[0].body == {
        "pageNumber": 1,
        "pageSize": 20,
        "sortField": "legalName",
        "sortOrder": "ASC",
        "name": "Acme",
        "status": "ACTIVE",
        "includeMerged": True,
    }


def test_search_success_echoes_pagination(bridge, messages):
    bridge.respond(
        "POST",
        SEARCH_ENDPOINT,
        200,
        {"results": [{"partyId": "P-1"}], "totalCount": 41, "pageNumber": 3, "pageSize": 10},
    )

    output = search_parties(bridge, {"taxId": "12-345", "pageNumber": "3", "pageSize": 10}, messages)

    assert bridge.calls[0].body["pageNumber"] == 3
    assert output == {"results": [{"partyId": "P-1"}], "totalCount": 41, "pageNumber": 3, "pageSize": 10}
    assert messages.errors == []


def test_search_not_implemented_is_informational(bridge, messages):
    output = search_parties(bridge, {"email": "ops@acme.test"}, messages)

    assert output == {"results": [], "totalCount": 0}
    assert messages.errors == []
    assert messages.messages == ["Backend search not yet implemented (501)"]


def test_search_failure_leaves_empty_results(bridge, messages):
    bridge.respond("POST", SEARCH_ENDPOINT, 403, {"message": "nope"})
    output = search_parties(bridge, {"phone": "555-0100"}, messages)

    assert output == {"results": [], "totalCount": 0}
    assert messages.errors == ["Search failed: nope"]


def test_search_validation_failure_surfaces_backend_message(bridge, messages):
    bridge.respond("POST", SEARCH_ENDPOINT, 400, {"message": "pageSize too large"})
    output = search_parties(bridge, {"name": "Acme"}, messages)

    assert output == {"results": [], "totalCount": 0}
    assert messages.errors == ["Search failed: pageSize too large"]


def test_search_failure_without_message_is_unknown_error(bridge, messages):
    bridge.respond("POST", SEARCH_ENDPOINT, 403)
    search_parties(bridge, {"name": "Acme"}, messages)
    assert messages.errors == ["Search failed: Unknown error"]


def test_search_skips_malformed_result_rows(bridge, messages):
    bridge.respond("POST", SEARCH_ENDPOINT, 200, {"results": [{"partyId": "P-1"}, "P-2"], "totalCount": 2})
    output = search_parties(bridge, {"name": "Acme"}, messages)

    assert output["results"] == [{"partyId": "P-1"}]
    assert output["totalCount"] == 2
    assert messages.errors == []


def test_search_transport_fault_leaves_empty_results(bridge, messages):
    bridge.fail("POST", SEARCH_ENDPOINT, "timed out")
    output = search_parties(bridge, {"phone": "555-0100"}, messages)

    assert output == {"results": [], "totalCount": 0}
    assert messages.errors == ["System error: timed out"]


def test_search_invalid_page_size_rejected_locally(bridge, messages):
    output = search_parties(bridge, {"name": "Acme", "pageSize": "lots"}, messages)

    assert bridge.calls == []
    assert output == {"results": [], "totalCount": 0}
    assert len(messages.errors) == 1
    assert messages.errors[0].startswith("pageSize: ")


# -- duplicate check --

def test_duplicate_check_success_returns_candidates(bridge, messages):
    bridge.respond("POST", DUPLICATE_CHECK_ENDPOINT, 200, {"candidates": [{"partyId": "P-9", "matchScore": 0.8}]})

    output = check_duplicate_parties(
        bridge,
        {"legalName": "Acme Inc", "taxId": "", "externalIdentifiers": {"DUNS": "0001"}},
        messages,
    )

    assert output == {"candidates": [{"partyId": "P-9", "matchScore": 0.8}]}
    assert bridge.calls[0].body == {"legalName": "Acme Inc", "externalIdentifiers": {"DUNS": "0001"}}


def test_duplicate_check_skips_malformed_candidates(bridge, messages):
    bridge.respond("POST", DUPLICATE_CHECK_ENDPOINT, 200, {"candidates": [{"partyId": "P-9"}, 42]})
    output = check_duplicate_parties(bridge, {"legalName": "Acme Inc"}, messages)
    assert output == {"candidates": [{"partyId": "P-9"}]}


def test_duplicate_check_degrades_silently(bridge, messages):
    bridge.respond("POST", DUPLICATE_CHECK_ENDPOINT, 403)
    assert check_duplicate_parties(bridge, {"legalName": "Acme"}, messages) == {"candidates": []}

    bridge.respond("POST", DUPLICATE_CHECK_ENDPOINT, 500, {"message": "boom"})
    assert check_duplicate_parties(bridge, {"legalName": "Acme"}, messages) == {"candidates": []}

    bridge.fail("POST", DUPLICATE_CHECK_ENDPOINT)
    assert check_duplicate_parties(bridge, {"legalName": "Acme"}, messages) == {"candidates": []}

    assert messages.errors == []
    assert messages.messages == []
