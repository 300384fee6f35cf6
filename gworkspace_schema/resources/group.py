"""Groups."""
from __future__ import annotations

from ..core.schema import Block, Bool, Int64, ListOf, ResourceSchema, String
from ..core.values import ValueKind
from .common import TYPE_PREFIX, resource_id, scope_note


def group_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}group",
        "Group resource manages Google Workspace Groups. " + scope_note("admin.directory.group"),
        Block([
            String(
                "email",
                "The group's email address. If your account has multiple domains, select the appropriate "
                "domain for the email address. The email must be unique.",
                required=True,
            ),
            String("name", "The group's display name.", optional=True, computed=True),
            String(
                "description",
                "An extended description to help users determine the purpose of a group.",
                optional=True,
            ),
            Bool(
                "admin_created",
                "Value is true if this group was created by an administrator rather than a user.",
                computed=True,
            ),
            Int64(
                "direct_members_count",
                "The number of users that are direct members of the group. Members of child groups are not counted.",
                computed=True,
            ),
            ListOf("aliases", ValueKind.STRING, "List of group's email addresses.", optional=True),
            ListOf(
                "non_editable_aliases",
                ValueKind.STRING,
                "List of the group's non-editable alias email addresses that are outside of the account's "
                "primary domain or subdomains.",
                computed=True,
            ),
            resource_id("Group identifier"),
        ]),
    )
