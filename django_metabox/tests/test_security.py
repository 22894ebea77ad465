from types import SimpleNamespace

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser, Permission
from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings

from apps.pages.models import Page
from django_metabox.security import SecurityGate, has_capability, make_token, verify_token

User = get_user_model()


class TokenTests(SimpleTestCase):
    def setUp(self):
        self.user = SimpleNamespace(pk=7)

    def test_round_trip(self):
        token = make_token("save-box", self.user)
        self.assertTrue(verify_token(token, "save-box", self.user))

    def test_token_is_bound_to_action(self):
        token = make_token("save-box", self.user)
        self.assertFalse(verify_token(token, "save-other", self.user))

    def test_token_is_bound_to_user(self):
        token = make_token("save-box", self.user)
        self.assertFalse(verify_token(token, "save-box", SimpleNamespace(pk=8)))
        self.assertFalse(verify_token(token, "save-box", AnonymousUser()))

    def test_garbage_tokens(self):
        for token in (None, "", "nonsense", 12, ["x"]):
            with self.subTest(token=token):
                self.assertFalse(verify_token(token, "save-box", self.user))

    @override_settings(METABOX_TOKEN_MAX_AGE=-1)
    def test_expired_token(self):
        token = make_token("save-box", self.user)
        self.assertFalse(verify_token(token, "save-box", self.user))


class CapabilityTests(TestCase):
    capability = "django_metabox.change_metavalue"

    @classmethod
    def setUpTestData(cls):
        cls.page = Page.objects.create(title="Home", slug="home")
        cls.plain = User.objects.create_user(username="plain")
        cls.editor = User.objects.create_user(username="editor")
        cls.editor.user_permissions.add(
            Permission.objects.get(content_type__app_label="django_metabox", codename="change_metavalue")
        )
        cls.staff = User.objects.create_user(username="staff", is_staff=True)
        cls.admin = User.objects.create_superuser(username="admin", password="pass")

    def test_anonymous_is_denied(self):
        self.assertFalse(has_capability(AnonymousUser(), self.capability, self.page))
        self.assertFalse(has_capability(None, self.capability, self.page))

    def test_permission_is_required(self):
        self.assertFalse(has_capability(self.plain, self.capability, self.page))
        self.assertTrue(has_capability(User.objects.get(pk=self.editor.pk), self.capability, self.page))

    def test_superuser_bypasses(self):
        self.assertTrue(has_capability(self.admin, "pages.unknown_perm", self.page))

    def test_staff_bypass_follows_setting(self):
        self.assertTrue(has_capability(self.staff, self.capability, self.page))
        with override_settings(METABOX_STAFF_BYPASS=False):
            self.assertFalse(has_capability(self.staff, self.capability, self.page))

    def test_object_permission_is_consulted(self):
        user = SimpleNamespace(
            is_authenticated=True,
            is_superuser=False,
            is_staff=False,
            has_perm=lambda perm, obj=None: obj is not None,
        )
        self.assertTrue(has_capability(user, self.capability, self.page))
        self.assertFalse(has_capability(user, self.capability))


class SecurityGateTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.page = Page.objects.create(title="Home", slug="home")
        cls.admin = User.objects.create_superuser(username="admin", password="pass")
        cls.plain = User.objects.create_user(username="plain")

    def setUp(self):
        self.gate = SecurityGate("box_nonce", "save-box", "django_metabox.change_metavalue")
        self.factory = RequestFactory()

    def _request(self, user, token):
        data = {} if token is None else {"box_nonce": token}
        request = self.factory.post("/", data)
        request.user = user
        return request

    def test_allows_valid_token_and_capability(self):
        request = self._request(self.admin, self.gate.token_for(self.admin))
        self.assertTrue(self.gate.allows(request, self.page))

    def test_missing_token(self):
        self.assertFalse(self.gate.allows(self._request(self.admin, None), self.page))

    def test_token_of_another_user(self):
        request = self._request(self.admin, self.gate.token_for(self.plain))
        self.assertFalse(self.gate.allows(request, self.page))

    def test_missing_capability(self):
        request = self._request(self.plain, self.gate.token_for(self.plain))
        self.assertFalse(self.gate.allows(request, self.page))
