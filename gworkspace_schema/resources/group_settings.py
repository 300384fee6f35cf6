"""Group settings (Groups Settings API)."""
from __future__ import annotations

from typing import Optional

from ..core.schema import Block, Bool, ResourceSchema, String
from ..core.validators import StringInSlice, StringLenBetween
from .common import TYPE_PREFIX, resource_id

CUSTOM_FOOTER_MAX = 1000
DENY_NOTIFICATION_MAX = 10000

# name -> (description, options, default)
OPTION_SETTINGS: dict[str, tuple[str, list[str], Optional[str]]] = {
    "who_can_join": (
        "Permission to join group.",
        ["ANYONE_CAN_JOIN", "ALL_IN_DOMAIN_CAN_JOIN", "INVITED_CAN_JOIN", "CAN_REQUEST_TO_JOIN"],
        "CAN_REQUEST_TO_JOIN",
    ),
    "who_can_view_membership": (
        "Permissions to view membership.",
        ["ALL_IN_DOMAIN_CAN_VIEW", "ALL_MEMBERS_CAN_VIEW", "ALL_MANAGERS_CAN_VIEW", "ALL_OWNERS_CAN_VIEW"],
        "ALL_MEMBERS_CAN_VIEW",
    ),
    "who_can_view_group": (
        "Permissions to view group messages.",
        ["ANYONE_CAN_VIEW", "ALL_IN_DOMAIN_CAN_VIEW", "ALL_MEMBERS_CAN_VIEW",
         "ALL_MANAGERS_CAN_VIEW", "ALL_OWNERS_CAN_VIEW"],
        "ALL_MEMBERS_CAN_VIEW",
    ),
    "who_can_post_message": (
        "Permissions to post messages.",
        ["NONE_CAN_POST", "ALL_MANAGERS_CAN_POST", "ALL_MEMBERS_CAN_POST", "ALL_OWNERS_CAN_POST",
         "ALL_IN_DOMAIN_CAN_POST", "ANYONE_CAN_POST"],
        None,
    ),
    "message_moderation_level": (
        "Moderation level of incoming messages.",
        ["MODERATE_ALL_MESSAGES", "MODERATE_NON_MEMBERS", "MODERATE_NEW_MEMBERS", "MODERATE_NONE"],
        "MODERATE_NONE",
    ),
    "spam_moderation_level": (
        "Specifies moderation levels for messages detected as spam.",
        ["ALLOW", "MODERATE", "SILENTLY_MODERATE", "REJECT"],
        "MODERATE",
    ),
    "reply_to": (
        "Specifies who receives the default reply.",
        ["REPLY_TO_CUSTOM", "REPLY_TO_SENDER", "REPLY_TO_LIST", "REPLY_TO_OWNER",
         "REPLY_TO_IGNORE", "REPLY_TO_MANAGERS"],
        "REPLY_TO_IGNORE",
    ),
    "who_can_leave_group": (
        "Permission to leave the group.",
        ["ALL_MANAGERS_CAN_LEAVE", "ALL_MEMBERS_CAN_LEAVE", "NONE_CAN_LEAVE"],
        "ALL_MEMBERS_CAN_LEAVE",
    ),
    "who_can_contact_owner": (
        "Permission to contact owner of the group via web UI.",
        ["ALL_IN_DOMAIN_CAN_CONTACT", "ALL_MANAGERS_CAN_CONTACT", "ALL_MEMBERS_CAN_CONTACT",
         "ANYONE_CAN_CONTACT", "ALL_OWNERS_CAN_CONTACT"],
        "ANYONE_CAN_CONTACT",
    ),
    "who_can_moderate_members": (
        "Specifies who can manage members.",
        ["ALL_MEMBERS", "OWNERS_AND_MANAGERS", "OWNERS_ONLY", "NONE"],
        "OWNERS_AND_MANAGERS",
    ),
    "who_can_moderate_content": (
        "Specifies who can moderate content.",
        ["ALL_MEMBERS", "OWNERS_AND_MANAGERS", "OWNERS_ONLY", "NONE"],
        "OWNERS_AND_MANAGERS",
    ),
    "who_can_assist_content": (
        "Specifies who can moderate metadata.",
        ["ALL_MEMBERS", "OWNERS_AND_MANAGERS", "MANAGERS_ONLY", "OWNERS_ONLY", "NONE"],
        "NONE",
    ),
    "who_can_discover_group": (
        "Specifies the set of users for whom this group is discoverable.",
        ["ANYONE_CAN_DISCOVER", "ALL_IN_DOMAIN_CAN_DISCOVER", "ALL_MEMBERS_CAN_DISCOVER"],
        "ALL_IN_DOMAIN_CAN_DISCOVER",
    ),
}

# name -> (description, default)
BOOL_SETTINGS: dict[str, tuple[str, bool]] = {
    "allow_external_members": (
        "Identifies whether members external to your organization can join the group.", False),
    "allow_web_posting": ("Allows posting from web.", True),
    "is_archived": ("Allows the Group contents to be archived.", False),
    "archive_only": ("Allows the group to be archived only. If true, the group is inactive.", False),
    "include_custom_footer": ("Whether to include custom footer.", False),
    "send_message_deny_notification": (
        "Allows a member to be notified if the member's message to the group is denied by the group owner.",
        False),
    "members_can_post_as_the_group": ("Enables members to post messages as the group.", False),
    "include_in_global_address_list": (
        "Enables the group to be included in the Global Address List.", True),
    "enable_collaborative_inbox": (
        "Specifies whether a collaborative inbox will remain turned on for the group.", False),
}


def _option(name: str) -> String:
    description, options, default = OPTION_SETTINGS[name]
    if default is None:
        return String(name, description, optional=True, computed=True, validators=[StringInSlice(options)])
    return String(name, description, optional=True, default=default, validators=[StringInSlice(options)])


def _flag(name: str) -> Bool:
    description, default = BOOL_SETTINGS[name]
    return Bool(name, description, optional=True, default=default)


def group_settings_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}group_settings",
        "Group Settings resource manages Google Workspace Groups Setting. Group Settings requires the "
        "`googleworkspace_group` resource and resides under the "
        "`https://www.googleapis.com/auth/apps.groups.settings` client scope.",
        Block([
            String("email", "The group's email address.", required=True),
            String("name", "Name of the group, which has a maximum size of 75 characters.", computed=True),
            String(
                "description",
                "Description of the group. The maximum group description is no more than 300 characters.",
                computed=True,
            ),
            _option("who_can_join"),
            _option("who_can_view_membership"),
            _option("who_can_view_group"),
            _flag("allow_external_members"),
            _option("who_can_post_message"),
            _flag("allow_web_posting"),
            String(
                "primary_language",
                "The primary language for group. Use the language tags from the supported languages.",
                optional=True,
            ),
            _flag("is_archived"),
            _flag("archive_only"),
            _option("message_moderation_level"),
            _option("spam_moderation_level"),
            _option("reply_to"),
            String(
                "custom_reply_to",
                "An email address used when replying to a message if the `reply_to` property is set to "
                "`REPLY_TO_CUSTOM`.",
                optional=True,
            ),
            _flag("include_custom_footer"),
            String(
                "custom_footer_text",
                "Set the content of custom footer text.",
                optional=True,
                validators=[StringLenBetween(0, CUSTOM_FOOTER_MAX)],
            ),
            _flag("send_message_deny_notification"),
            String(
                "default_message_deny_notification_text",
                "When a message is rejected, this is text for the rejection notification sent to the "
                "message's author.",
                optional=True,
                validators=[StringLenBetween(0, DENY_NOTIFICATION_MAX)],
            ),
            _flag("members_can_post_as_the_group"),
            _flag("include_in_global_address_list"),
            _option("who_can_leave_group"),
            _option("who_can_contact_owner"),
            _option("who_can_moderate_members"),
            _option("who_can_moderate_content"),
            _option("who_can_assist_content"),
            Bool(
                "custom_roles_enabled_for_settings_to_be_merged",
                "Specifies whether the group has a custom role that's included in one of the settings being merged.",
                computed=True,
            ),
            _flag("enable_collaborative_inbox"),
            _option("who_can_discover_group"),
            resource_id("Group Settings identifier"),
        ]),
    )
