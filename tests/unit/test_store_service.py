"""
Unit tests for certificate store operations.

HTTP calls are mocked with respx.
"""

import json

import httpx
import pytest
import respx

from certstore_client.exceptions import (
    MissingRequiredField,
    StoreValidationError,
    TransportError,
)
from certstore_client.models.store import (
    AddCertificateToStore,
    CertificateStoreTarget,
    CreateStoreArgs,
    RemoveCertificateFromStore,
    UpdateStoreArgs,
)
from certstore_client.services.stores import StoreService

BASE_URL = "https://keyfactor.example.com/KeyfactorAPI/"
STORE_ID = "0b39c1ad-8b3d-4c2f-9c5e-52b4f1b5f001"


@pytest.fixture
def store_service(transport):
    """Create a StoreService over the test transport."""
    return StoreService(transport)


@pytest.fixture
def create_args():
    """Valid store creation arguments."""
    return CreateStoreArgs(
        client_machine="web01.example.com",
        store_path="/etc/ssl/certs/web.pem",
        agent_id="5e6f7a8b-0000-4000-8000-000000000001",
        cert_store_type=103,
        properties={"ServerUsername": "admin", "ServerUseSsl": "true"},
    )


def store_body(**overrides) -> dict:
    """Store as returned by the service."""
    body = {
        "Id": STORE_ID,
        "ClientMachine": "web01.example.com",
        "StorePath": "/etc/ssl/certs/web.pem",
        "CertStoreType": 103,
        "Approved": True,
        "CreateIfMissing": False,
        "Properties": json.dumps({"ServerUsername": "admin", "ServerUseSsl": "true"}),
        "AgentId": "5e6f7a8b-0000-4000-8000-000000000001",
        "AgentAssigned": True,
    }
    body.update(overrides)
    return body


# ===========================
# Create Tests
# ===========================


@respx.mock
def test_create_store_sends_encoded_properties(store_service, create_args):
    """Test the property map is sent in its nested write form."""
    route = respx.post(f"{BASE_URL}CertificateStores").mock(
        return_value=httpx.Response(200, json=store_body())
    )

    result = store_service.create_store(create_args)

    sent = json.loads(route.calls.last.request.content)
    assert json.loads(sent["Properties"]) == {
        "ServerUsername": {"value": "admin"},
        "ServerUseSsl": {"value": "true"},
    }
    assert sent["ClientMachine"] == "web01.example.com"
    assert sent["AgentId"] == create_args.agent_id
    assert result.id == STORE_ID
    assert result.properties == {"ServerUsername": "admin", "ServerUseSsl": "true"}


@respx.mock
def test_create_store_keeps_prebuilt_properties_string(store_service, create_args):
    """Test a caller-supplied properties string is sent verbatim."""
    create_args.properties_string = '{"Custom": {"value": "x"}}'
    route = respx.post(f"{BASE_URL}CertificateStores").mock(
        return_value=httpx.Response(200, json=store_body())
    )

    store_service.create_store(create_args)

    sent = json.loads(route.calls.last.request.content)
    assert sent["Properties"] == '{"Custom": {"value": "x"}}'


@respx.mock
def test_create_store_does_not_modify_args(store_service, create_args):
    """Test the caller's arguments are left as they were."""
    respx.post(f"{BASE_URL}CertificateStores").mock(
        return_value=httpx.Response(200, json=store_body())
    )

    store_service.create_store(create_args)

    assert create_args.properties_string == ""


@respx.mock
def test_create_store_empty_properties(store_service, create_args):
    """Test an empty property map is sent as "{}"."""
    create_args.properties = {}
    route = respx.post(f"{BASE_URL}CertificateStores").mock(
        return_value=httpx.Response(200, json=store_body(Properties=""))
    )

    result = store_service.create_store(create_args)

    assert json.loads(route.calls.last.request.content)["Properties"] == "{}"
    assert result.properties == {}


@pytest.mark.parametrize(
    "field,message",
    [
        ("client_machine", "client machine is required for create of certificate store"),
        ("store_path", "store path is required for create of certificate store"),
        (
            "agent_id",
            "orchestrator agent id is required for create of certificate store",
        ),
    ],
)
@respx.mock(assert_all_called=False)
def test_create_store_validation(store_service, create_args, field, message):
    """Test each missing required field is reported before any request."""
    route = respx.post(f"{BASE_URL}CertificateStores")
    setattr(create_args, field, "")

    with pytest.raises(StoreValidationError) as exc_info:
        store_service.create_store(create_args)

    assert exc_info.value.field == field
    assert str(exc_info.value) == message
    assert not route.called


@respx.mock
def test_create_store_undecodable_response(store_service, create_args):
    """Test a response without Id raises a decode error."""
    respx.post(f"{BASE_URL}CertificateStores").mock(
        return_value=httpx.Response(200, json={"ClientMachine": "web01"})
    )

    with pytest.raises(MissingRequiredField):
        store_service.create_store(create_args)


# ===========================
# Update Tests
# ===========================


@respx.mock
def test_update_store(store_service):
    """Test an update is sent with PUT and decoded."""
    route = respx.put(f"{BASE_URL}CertificateStores").mock(
        return_value=httpx.Response(200, json=store_body(StorePath="/new/path"))
    )
    args = UpdateStoreArgs(
        id=STORE_ID,
        client_machine="web01.example.com",
        store_path="/new/path",
        agent_id="agent-1",
        properties={"ServerUsername": "root"},
    )

    result = store_service.update_store(args)

    sent = json.loads(route.calls.last.request.content)
    assert sent["Id"] == STORE_ID
    assert json.loads(sent["Properties"]) == {"ServerUsername": {"value": "root"}}
    assert result.store_path == "/new/path"


@pytest.mark.parametrize(
    "field,message",
    [
        ("client_machine", "client machine is required for update of certificate store"),
        ("store_path", "store path is required for update of certificate store"),
        (
            "agent_id",
            "orchestrator agent id is required for update of certificate store",
        ),
        ("id", "certificate store id is required"),
    ],
)
@respx.mock(assert_all_called=False)
def test_update_store_validation(store_service, field, message):
    """Test update rejects each missing required field without a request."""
    route = respx.put(f"{BASE_URL}CertificateStores")
    args = UpdateStoreArgs(
        id=STORE_ID, client_machine="m", store_path="p", agent_id="a"
    )
    setattr(args, field, "")

    with pytest.raises(StoreValidationError) as exc_info:
        store_service.update_store(args)

    assert str(exc_info.value) == message
    assert not route.called


# ===========================
# Delete Tests
# ===========================


@respx.mock
def test_delete_store(store_service):
    """Test delete succeeds on 204 No Content."""
    route = respx.delete(f"{BASE_URL}CertificateStores/{STORE_ID}").mock(
        return_value=httpx.Response(204)
    )

    assert store_service.delete_store(STORE_ID) is None
    assert route.called


@respx.mock
def test_delete_store_unexpected_status(store_service):
    """Test a success status other than 204 is reported as a TransportError."""
    respx.delete(f"{BASE_URL}CertificateStores/{STORE_ID}").mock(
        return_value=httpx.Response(200, json={})
    )

    with pytest.raises(TransportError) as exc_info:
        store_service.delete_store(STORE_ID)

    assert exc_info.value.status_code == 200
    assert exc_info.value.method == "DELETE"
    assert exc_info.value.endpoint == f"CertificateStores/{STORE_ID}"
    assert "200" in str(exc_info.value)


@respx.mock
def test_delete_store_not_found(store_service):
    """Test an error status from the service is reported with its message."""
    respx.delete(f"{BASE_URL}CertificateStores/{STORE_ID}").mock(
        return_value=httpx.Response(
            404,
            json={"ErrorCode": "0xA0110002", "Message": "Certificate store not found"},
        )
    )

    with pytest.raises(TransportError) as exc_info:
        store_service.delete_store(STORE_ID)

    assert exc_info.value.status_code == 404
    assert "404" in str(exc_info.value)
    assert "Certificate store not found" in str(exc_info.value)


@pytest.mark.parametrize("store_id", ["", "   "])
def test_delete_store_requires_id(store_service, store_id):
    """Test an empty store id is rejected."""
    with pytest.raises(StoreValidationError):
        store_service.delete_store(store_id)


# ===========================
# List / Get Tests
# ===========================


@respx.mock
def test_list_stores(store_service):
    """Test listing decodes every store and its properties."""
    respx.get(f"{BASE_URL}CertificateStores/").mock(
        return_value=httpx.Response(
            200, json=[store_body(), store_body(Id="other", Properties="")]
        )
    )

    stores = store_service.list_stores()

    assert [store.id for store in stores] == [STORE_ID, "other"]
    assert stores[0].properties["ServerUsername"] == "admin"
    assert stores[1].properties == {}


@respx.mock
def test_list_stores_unexpected_status(store_service):
    """Test a success status other than 200 is reported."""
    respx.get(f"{BASE_URL}CertificateStores/").mock(
        return_value=httpx.Response(202, json=[])
    )

    with pytest.raises(TransportError) as exc_info:
        store_service.list_stores()

    assert exc_info.value.status_code == 202


@respx.mock
def test_get_store_by_id(store_service):
    """Test fetching a store decodes its flat properties string."""
    respx.get(f"{BASE_URL}CertificateStores/{STORE_ID}").mock(
        return_value=httpx.Response(200, json=store_body())
    )

    store = store_service.get_store_by_id(STORE_ID)

    assert store.id == STORE_ID
    assert store.properties == {"ServerUsername": "admin", "ServerUseSsl": "true"}


@respx.mock
def test_get_store_by_id_malformed_properties(store_service):
    """Test malformed properties degrade to an empty map, not an error."""
    respx.get(f"{BASE_URL}CertificateStores/{STORE_ID}").mock(
        return_value=httpx.Response(200, json=store_body(Properties="{not json"))
    )

    store = store_service.get_store_by_id(STORE_ID)

    assert store.properties == {}
    assert store.properties_string == "{not json"


# ===========================
# Add / Remove Certificate Tests
# ===========================


@respx.mock
def test_add_certificate_to_stores(store_service):
    """Test adding a certificate returns the created job ids."""
    route = respx.post(f"{BASE_URL}CertificateStores/Certificates/Add").mock(
        return_value=httpx.Response(200, json=["job-1", "job-2"])
    )
    request = AddCertificateToStore(
        certificate_id=4211,
        certificate_stores=[
            CertificateStoreTarget(certificate_store_id=STORE_ID, alias="web01"),
            CertificateStoreTarget(certificate_store_id="other", alias="web01"),
        ],
    )

    job_ids = store_service.add_certificate_to_stores(request)

    sent = json.loads(route.calls.last.request.content)
    assert sent["CertificateId"] == 4211
    assert len(sent["CertificateStores"]) == 2
    assert job_ids == ["job-1", "job-2"]


@respx.mock
def test_remove_certificate_from_stores(store_service):
    """Test removing a certificate returns the created job ids."""
    route = respx.post(f"{BASE_URL}CertificateStores/Certificates/Remove").mock(
        return_value=httpx.Response(200, json=["job-3"])
    )
    request = RemoveCertificateFromStore(
        certificate_stores=[
            CertificateStoreTarget(certificate_store_id=STORE_ID, alias="web01")
        ],
    )

    assert store_service.remove_certificate_from_stores(request) == ["job-3"]
    assert route.called


def test_add_certificate_requires_targets(store_service):
    """Test a request without target stores is rejected."""
    with pytest.raises(StoreValidationError) as exc_info:
        store_service.add_certificate_to_stores(AddCertificateToStore(certificate_id=1))

    assert exc_info.value.field == "certificate_stores"


def test_remove_certificate_requires_store_ids(store_service):
    """Test a target with an empty store id is rejected."""
    request = RemoveCertificateFromStore(
        certificate_stores=[CertificateStoreTarget(certificate_store_id=" ")]
    )

    with pytest.raises(StoreValidationError) as exc_info:
        store_service.remove_certificate_from_stores(request)

    assert exc_info.value.field == "certificate_store_id"


# ===========================
# Inventory Tests
# ===========================


@respx.mock
def test_get_store_inventory(store_service, sample_slot):
    """Test the inventory endpoint is decoded into typed items."""
    respx.get(f"{BASE_URL}CertificateStores/{STORE_ID}/Inventory").mock(
        return_value=httpx.Response(200, json=[sample_slot])
    )

    items = store_service.get_store_inventory(STORE_ID)

    assert len(items) == 1
    assert items[0].ids == {4211}


@respx.mock
def test_get_store_inventory_empty(store_service):
    """Test an empty inventory returns an empty list."""
    respx.get(f"{BASE_URL}CertificateStores/{STORE_ID}/Inventory").mock(
        return_value=httpx.Response(200, json=[])
    )

    assert store_service.get_store_inventory(STORE_ID) == []


@respx.mock
def test_get_store_inventory_missing_thumbprint(store_service, sample_slot):
    """Test a certificate without Thumbprint fails the call."""
    del sample_slot["Certificates"][0]["Thumbprint"]
    respx.get(f"{BASE_URL}CertificateStores/{STORE_ID}/Inventory").mock(
        return_value=httpx.Response(200, json=[sample_slot])
    )

    with pytest.raises(MissingRequiredField):
        store_service.get_store_inventory(STORE_ID)
