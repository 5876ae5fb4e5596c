import pytest

from finloan.core.exceptions import InvalidInput, NotFound, PersistenceError, ValidationError
from finloan.services import EnquiryService, validate_payload

ENQUIRY = {
    "mobile": 9876543210,
    "email": "asha@example.com",
    "amt": 25000,
    "type": "personal",
    "msg": "Wedding expenses",
}


async def _submit(store, **overrides):
    payload = validate_payload("enquiry", {**ENQUIRY, **overrides})
    return await EnquiryService(store).submit_enquiry(payload)


@pytest.mark.asyncio
async def test_submitted_enquiry_can_be_found_by_mobile(store):
    await _submit(store)

    stored = await store.find_one("requests", {"mobile": 9876543210})
    assert stored["email"] == "asha@example.com"
    assert stored["amt"] == 25000
    assert stored["type"] == "personal"
    assert stored["msg"] == "Wedding expenses"
    assert "code" not in stored


@pytest.mark.asyncio
async def test_submit_does_not_deduplicate(store):
    await _submit(store)
    await _submit(store, amt=1000)
    assert len(store.all("requests")) == 2


@pytest.mark.asyncio
async def test_submit_store_rejection(store):
    store.fail = True
    with pytest.raises(PersistenceError) as exc:
        await _submit(store)
    assert exc.value.message == "Failed to submit loan enquiry"
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_calculate_simple_interest(catalog_store):
    quote = await EnquiryService(catalog_store).calculate_interest("personal", 1000, 12)

    assert quote.interest == 1200
    assert quote.totalAmount == 2200
    assert quote.loanAmount == 1000
    assert quote.tenure == 12


@pytest.mark.asyncio
async def test_calculate_accepts_numeric_strings(catalog_store):
    quote = await EnquiryService(catalog_store).calculate_interest("home", "5000", "6")
    assert quote.interest == 2400
    assert quote.totalAmount == 7400


@pytest.mark.asyncio
@pytest.mark.parametrize("amount,tenure", [(0, 12), (1000, 0), (None, 12), (1000, None), (-5, 12), ("abc", 3)])
async def test_calculate_rejects_missing_or_non_positive(catalog_store, amount, tenure):
    with pytest.raises(InvalidInput) as exc:
        await EnquiryService(catalog_store).calculate_interest("personal", amount, tenure)
    assert exc.value.message == "Amount and tenure are required"


@pytest.mark.asyncio
async def test_calculate_unknown_product_checked_first(catalog_store):
    with pytest.raises(NotFound) as exc:
        await EnquiryService(catalog_store).calculate_interest("yacht", None, None)
    assert exc.value.message == "Loan type not found"


@pytest.mark.asyncio
async def test_calculate_writes_nothing(catalog_store):
    await EnquiryService(catalog_store).calculate_interest("personal", 1000, 12)
    assert catalog_store.all("requests") == []


@pytest.mark.asyncio
async def test_remittance_requires_an_enquiry(store):
    service = EnquiryService(store)
    with pytest.raises(NotFound) as exc:
        await service.request_remittance(9876543210, 5000)
    assert exc.value.message == "No loan enquiry found for this mobile number"

    await _submit(store)
    message = await service.request_remittance(9876543210, 5000)
    assert message == "Remittance of 5000 for loan approved successfully"


@pytest.mark.asyncio
async def test_remittance_ignores_enquiry_amount(store):
    await _submit(store, amt=100)
    message = await EnquiryService(store).request_remittance("9876543210", 99999.5)
    assert message == "Remittance of 99999.5 for loan approved successfully"


@pytest.mark.asyncio
@pytest.mark.parametrize("mobile,amount", [(None, 5000), (9876543210, None), (0, 5000), (9876543210, 0), ("abc", 10)])
async def test_remittance_missing_fields(store, mobile, amount):
    with pytest.raises(InvalidInput) as exc:
        await EnquiryService(store).request_remittance(mobile, amount)
    assert exc.value.message == "Amount and mobile number are required"


@pytest.mark.asyncio
async def test_update_patches_first_match_only(store):
    await _submit(store)
    await _submit(store, email="second@example.com")

    updated = await EnquiryService(store).update_enquiry(
        9876543210, {"mobile": 9876543210, "amt": 40000, "msg": "Changed plans"}
    )

    assert updated.amt == 40000
    assert updated.msg == "Changed plans"
    assert updated.email == "asha@example.com"
    first, second = store.all("requests")
    assert first["amt"] == 40000
    assert second["amt"] == 25000


@pytest.mark.asyncio
async def test_update_cannot_overwrite_unrelated_fields(store):
    await _submit(store)

    await EnquiryService(store).update_enquiry(
        9876543210, {"mobile": 9876543210, "id": "hijack", "approved": True, "type": "home"}
    )

    stored = store.all("requests")[0]
    assert stored["type"] == "home"
    assert stored["mobile"] == 9876543210
    assert stored["id"] != "hijack"
    assert "approved" not in stored


@pytest.mark.asyncio
async def test_update_rejects_malformed_fields(store):
    await _submit(store)
    with pytest.raises(ValidationError) as exc:
        await EnquiryService(store).update_enquiry(9876543210, {"email": "nope"})
    assert exc.value.message == '"email" must be a valid email'


@pytest.mark.asyncio
async def test_update_without_patch_returns_record(store):
    await _submit(store)
    updated = await EnquiryService(store).update_enquiry(9876543210, {"mobile": 9876543210})
    assert updated.amt == 25000


@pytest.mark.asyncio
async def test_update_unknown_mobile(store):
    with pytest.raises(NotFound) as exc:
        await EnquiryService(store).update_enquiry(1111111111, {"amt": 1})
    assert exc.value.message == "Request not found"


@pytest.mark.asyncio
async def test_update_requires_mobile(store):
    with pytest.raises(InvalidInput):
        await EnquiryService(store).update_enquiry(None, {"amt": 1})


@pytest.mark.asyncio
async def test_delete_twice_reports_not_found(store):
    await _submit(store)
    service = EnquiryService(store)

    deleted = await service.delete_enquiry(9876543210)
    assert deleted.mobile == 9876543210

    with pytest.raises(NotFound):
        await service.delete_enquiry(9876543210)


@pytest.mark.asyncio
async def test_delete_removes_one_duplicate(store):
    await _submit(store)
    await _submit(store, amt=1)

    await EnquiryService(store).delete_enquiry(9876543210)

    remaining = store.all("requests")
    assert len(remaining) == 1
    assert remaining[0]["amt"] == 1


@pytest.mark.asyncio
async def test_delete_store_failure(store):
    store.fail = True
    with pytest.raises(PersistenceError) as exc:
        await EnquiryService(store).delete_enquiry(9876543210)
    assert exc.value.message == "Failed to delete request"


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["amt", "email", "type"])
async def test_update_rejects_null_for_required_fields(store, field):
    await _submit(store)

    with pytest.raises(ValidationError) as exc:
        await EnquiryService(store).update_enquiry(9876543210, {"mobile": 9876543210, field: None})

    assert f'"{field}"' in exc.value.message
    stored = store.all("requests")[0]
    assert stored[field] is not None


@pytest.mark.asyncio
async def test_update_allows_clearing_optional_fields(store):
    await _submit(store)
    updated = await EnquiryService(store).update_enquiry(9876543210, {"msg": None})
    assert updated.msg is None


@pytest.mark.asyncio
async def test_calculate_keeps_whole_numbers_integral(catalog_store):
    quote = await EnquiryService(catalog_store).calculate_interest("personal", "1000", 12)
    assert quote.model_dump() == {"totalAmount": 2200, "interest": 1200, "loanAmount": 1000, "tenure": 12}
    assert all(isinstance(v, int) for v in quote.model_dump().values())


@pytest.mark.asyncio
async def test_remittance_echoes_string_amount_as_sent(store):
    await _submit(store)
    message = await EnquiryService(store).request_remittance(9876543210, "5000.50")
    assert message == "Remittance of 5000.50 for loan approved successfully"
