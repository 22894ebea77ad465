from django.test import TestCase

from apps.pages.models import Page, Post
from django_metabox.boxes import RepeatMetaBox, SimpleMetaBox
from django_metabox.registry import MetaBoxRegistry, metabox_registry


class MetaBoxRegistryTests(TestCase):
    def setUp(self):
        self.registry = MetaBoxRegistry()
        self.page = Page.objects.create(title="Home", slug="home")
        self.post = Post.objects.create(title="News", slug="news")

    def test_register_and_get(self):
        box = self.registry.register(SimpleMetaBox("Details", "details"))
        self.assertIs(self.registry.get("details"), box)
        self.assertEqual(list(self.registry.all()), ["details"])

    def test_duplicate_id_rejected(self):
        self.registry.register(SimpleMetaBox("Details", "details"))
        with self.assertRaises(ValueError):
            self.registry.register(RepeatMetaBox("Again", "details"))

    def test_only_meta_boxes_accepted(self):
        with self.assertRaises(TypeError):
            self.registry.register(object())

    def test_unregister(self):
        self.registry.register(SimpleMetaBox("Details", "details"))
        self.registry.unregister("details")
        self.registry.unregister("missing")
        self.assertIsNone(self.registry.get("details"))

    def test_for_record_keeps_registration_order(self):
        everywhere = self.registry.register(SimpleMetaBox("A", "a"))
        posts = self.registry.register(SimpleMetaBox("B", "b"))
        posts.set_enables("post")
        pages = self.registry.register(SimpleMetaBox("C", "c"))
        pages.set_enables("page")
        self.assertEqual(self.registry.for_record(self.page), [everywhere, pages])
        self.assertEqual(self.registry.for_record(self.post), [everywhere, posts])


class EnablesTests(TestCase):
    def setUp(self):
        self.page = Page.objects.create(title="Home", slug="home")
        self.box = SimpleMetaBox("Details", "details")

    def test_default_enables_posts_and_pages(self):
        self.assertEqual(self.box.enables, ["post", "page"])
        self.assertTrue(self.box.is_enabled_for(self.page))

    def test_enable_by_pk(self):
        self.box.set_enables(self.page.pk)
        self.assertTrue(self.box.is_enabled_for(self.page))
        self.box.set_enables(self.page.pk + 1)
        self.assertFalse(self.box.is_enabled_for(self.page))

    def test_enable_by_slug_or_label(self):
        self.box.set_enables("home")
        self.assertTrue(self.box.is_enabled_for(self.page))
        self.box.set_enables("pages.page")
        self.assertTrue(self.box.is_enabled_for(self.page))
        self.box.set_enables("post", "about")
        self.assertFalse(self.box.is_enabled_for(self.page))

    def test_invalid_box_id(self):
        for box_id in ("", "has space", "a[b]"):
            with self.subTest(box_id=box_id):
                with self.assertRaises(ValueError):
                    SimpleMetaBox("Details", box_id)

    def test_derived_keys(self):
        self.assertEqual(self.box.nonce_key, "details_nonce")
        self.assertEqual(self.box.action_key, "save-details")
        self.assertEqual(self.box.capability, "django_metabox.change_metavalue")


class GlobalRegistryTests(TestCase):
    def test_configured_modules_are_loaded(self):
        self.assertEqual(
            list(metabox_registry.all()),
            ["page_details", "page_contact", "page_addresses"],
        )
