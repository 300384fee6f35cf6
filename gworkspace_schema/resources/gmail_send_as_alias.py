"""Gmail send-as aliases."""
from __future__ import annotations

from ..core.schema import Block, Bool, Int64, ResourceSchema, SingleNested, String
from ..core.validators import StringInSlice
from .common import TYPE_PREFIX, resource_id, scope_note

SMTP_SECURITY_MODES = ["securityModeUnspecified", "none", "ssl", "starttls"]


def gmail_send_as_alias_schema() -> ResourceSchema:
    smtp_msa = SingleNested(
        "smtp_msa",
        [
            String("host", "The hostname of the SMTP service.", required=True),
            Int64("port", "The port of the SMTP service.", required=True),
            String(
                "username",
                "The username that will be used for authentication with the SMTP service. "
                "Write-only; never populated in responses.",
                optional=True,
            ),
            String(
                "password",
                "The password that will be used for authentication with the SMTP service. "
                "Write-only; never populated in responses.",
                optional=True,
                sensitive=True,
            ),
            String(
                "security_mode",
                "The protocol that will be used to secure communication with the SMTP service.",
                optional=True,
                default="securityModeUnspecified",
                validators=[StringInSlice(SMTP_SECURITY_MODES)],
            ),
        ],
        "An optional SMTP service that will be used as an outbound relay for mail sent using this alias. "
        "This setting only applies to custom 'from' aliases.",
        optional=True,
    )

    return ResourceSchema(
        f"{TYPE_PREFIX}gmail_send_as_alias",
        "Gmail Send As Alias resource. The Gmail API must be enabled for the workspace and the user "
        "being configured needs a Gmail license. " + scope_note("gmail.settings"),
        Block([
            String("primary_email", "User's primary email address.", required=True),
            String(
                "send_as_email",
                "The email address that appears in the 'From:' header for mail sent using this alias.",
                required=True,
            ),
            String(
                "display_name",
                "A name that appears in the 'From:' header for mail sent using this alias.",
                optional=True,
            ),
            String(
                "reply_to_address",
                "An optional email address that is included in a 'Reply-To:' header for mail sent using this alias.",
                optional=True,
            ),
            String(
                "signature",
                "An optional HTML signature that is included in messages composed with this alias in the Gmail web UI.",
                optional=True,
            ),
            Bool(
                "is_primary",
                "Whether this address is the primary address used to login to the account.",
                computed=True,
            ),
            Bool(
                "is_default",
                "Whether this address is selected as the default 'From:' address. The only legal value "
                "clients may write is true.",
                optional=True,
            ),
            Bool(
                "treat_as_alias",
                "Whether Gmail should treat this address as an alias for the user's primary email address.",
                optional=True,
                default=True,
            ),
            smtp_msa,
            String(
                "verification_status",
                "Indicates whether this address has been verified for use as a send-as alias.",
                computed=True,
            ),
            resource_id(),
        ]),
    )
