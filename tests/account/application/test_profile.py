import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.account.profile import UpdateProfile
from storefront.account.user import User


class TestUpdateProfile:
    def test_updates_billing_details(self, make_user):
        user = make_user()

        current_domain.process(
            UpdateProfile(user_id=str(user.id), vat_number="987654321", phone="912345678"),
            asynchronous=False,
        )

        updated = current_domain.repository_for(User).get(user.id)
        assert updated.vat_number == "987654321"
        assert updated.phone == "912345678"
        assert updated.name == user.name

    def test_email_taken_by_someone_else_is_rejected(self, make_user):
        make_user(username="ana")
        rui = make_user(username="rui")

        with pytest.raises(ValidationError) as exc:
            current_domain.process(UpdateProfile(user_id=str(rui.id), email="ana@example.pt"), asynchronous=False)
        assert "email" in exc.value.messages

    def test_keeping_own_email_is_allowed(self, make_user):
        ana = make_user(username="ana")

        current_domain.process(
            UpdateProfile(user_id=str(ana.id), email="ana@example.pt", name="Ana M."),
            asynchronous=False,
        )

        assert current_domain.repository_for(User).get(ana.id).name == "Ana M."
