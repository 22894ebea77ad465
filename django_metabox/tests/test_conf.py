from django.test import SimpleTestCase, override_settings

from django_metabox.conf import DEFAULTS, MetaboxSettings, settings


class MetaboxSettingsTests(SimpleTestCase):
    def test_defaults_apply_when_unset(self):
        proxy = MetaboxSettings()
        self.assertEqual(proxy.METABOX_ROW_PLACEHOLDER, "_row")
        self.assertEqual(proxy.METABOX_DATE_DISPLAY_FORMAT, "d-m-Y")
        self.assertEqual(set(proxy.defaults), set(DEFAULTS))

    @override_settings(METABOX_TOKEN_MAX_AGE=60)
    def test_django_settings_take_precedence(self):
        self.assertEqual(settings.METABOX_TOKEN_MAX_AGE, 60)

    def test_host_settings_are_read(self):
        self.assertEqual(settings.METABOX_MODULES, ["apps.pages.metaboxes:register"])

    def test_unknown_key_raises(self):
        with self.assertRaises(AttributeError):
            settings.SECRET_KEY
        with self.assertRaises(AttributeError):
            settings.METABOX_UNKNOWN
