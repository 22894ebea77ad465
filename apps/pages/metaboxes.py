"""Meta boxes shown on page and post edit screens.

Loaded through ``METABOX_MODULES = ["apps.pages.metaboxes:register"]``.
"""

from django_metabox.boxes import MultipleMetaBox, RepeatMetaBox, SimpleMetaBox


def build_details_box():
    box = SimpleMetaBox("Details", "page_details")
    box.add_field("text", "subtitle", placeholder="Subtitle")
    box.add_field("date", "published_on")
    box.add_field("url", "cover", placeholder="Cover image URL")
    box.add_field("textarea", "summary", rows=4)
    box.add_field("editor", "sidebar")
    return box


def build_contact_box():
    box = MultipleMetaBox("Contact", "page_contact")
    box.set_enables("page")
    box.group_fields(
        "contact_",
        box.add_field("text", "name", placeholder="Name"),
        box.add_field("email", "email", placeholder="Email"),
        box.add_field("tel", "phone", placeholder="Phone"),
    )
    box.group_fields(
        "opening_",
        box.add_field("text", "days", placeholder="Days"),
        box.add_field("text", "hours", placeholder="Hours"),
    )
    return box


def build_addresses_box():
    box = RepeatMetaBox("Addresses", "page_addresses")
    box.set_enables("page")
    box.set_capability("pages.change_page")
    box.group_fields(
        "address_",
        box.add_field("text", "street", placeholder="Street"),
        box.add_field("text", "city", placeholder="City"),
    )
    return box


def register(registry):
    registry.register(build_details_box())
    registry.register(build_contact_box())
    registry.register(build_addresses_box())
