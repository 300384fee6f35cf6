"""Group membership: a single member, or the full member set of a group."""
from __future__ import annotations

from ..core.schema import Attribute, Block, ResourceSchema, SetNested, String
from ..core.validators import StringInSlice
from .common import TYPE_PREFIX, resource_id, scope_note

MEMBER_ROLES = ["MANAGER", "MEMBER", "OWNER"]
MEMBER_TYPES = ["CUSTOMER", "GROUP", "USER"]
DELIVERY_SETTINGS = ["ALL_MAIL", "DAILY", "DIGEST", "DISABLED", "NONE"]


def _group_id() -> String:
    return String(
        "group_id",
        "Identifies the group in the API request. The value can be the group's email address, "
        "group alias, or the unique group ID.",
        required=True,
    )


def member_attributes() -> list[Attribute]:
    """Attributes shared by a standalone member and an element of ``members``."""
    return [
        String(
            "email",
            "The member's email address. A member can be a user or another group. The email must be "
            "unique and cannot be an alias of another group.",
            required=True,
        ),
        String(
            "role",
            "The member's role in a group. The API returns an error for cycles in group memberships.",
            optional=True,
            default="MEMBER",
            validators=[StringInSlice(MEMBER_ROLES)],
        ),
        String(
            "type",
            "The type of group member.",
            optional=True,
            default="USER",
            validators=[StringInSlice(MEMBER_TYPES)],
        ),
        String("status", "Status of member.", computed=True),
        String(
            "delivery_settings",
            "Defines mail delivery preferences of member.",
            optional=True,
            default="ALL_MAIL",
            validators=[StringInSlice(DELIVERY_SETTINGS)],
        ),
    ]


def group_member_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}group_member",
        "Group Member resource manages Google Workspace Groups Members. " + scope_note("admin.directory.group"),
        Block([
            _group_id(),
            *member_attributes(),
            String("etag", "ETag of the resource.", computed=True),
            String(
                "member_id",
                "The unique ID of the group member. A member id can be used as a member request URI's memberKey.",
                computed=True,
            ),
            resource_id(),
        ]),
    )


def group_members_schema() -> ResourceSchema:
    members = SetNested(
        "members",
        [
            *member_attributes(),
            String(
                "id",
                "The unique ID of the group member. A member id can be used as a member request URI's memberKey.",
                computed=True,
            ),
        ],
        "The members of the group.",
        optional=True,
    )
    return ResourceSchema(
        f"{TYPE_PREFIX}group_members",
        "Group Members resource manages Google Workspace Groups Members. " + scope_note("admin.directory.group"),
        Block([_group_id(), members, resource_id("Group Members identifier")]),
    )
