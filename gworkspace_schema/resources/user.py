"""Users and their nested profile sub-records."""
from __future__ import annotations

from ..core.schema import (
    Block,
    Bool,
    Int64,
    ListNested,
    ListOf,
    MapOf,
    ResourceSchema,
    SingleNested,
    String,
)
from ..core.validators import StringInSlice, StringIsJson, StringLenBetween
from ..core.values import ValueKind
from .common import TYPE_PREFIX, resource_id, scope_note

PASSWORD_MIN = 8
PASSWORD_MAX = 100
NAME_PART_MAX = 60

EMAIL_TYPES = ["custom", "home", "other", "work"]
EXTERNAL_ID_TYPES = ["account", "custom", "customer", "login_id", "network", "organization"]
RELATION_TYPES = [
    "admin_assistant", "assistant", "brother", "child", "custom", "domestic_partner",
    "dotted_line_manager", "exec_assistant", "father", "friend", "manager", "mother",
    "parent", "partner", "referred_by", "relative", "sister",
]
ADDRESS_TYPES = ["custom", "home", "other", "work"]
ORGANIZATION_TYPES = ["domain_only", "school", "unknown", "work"]
PHONE_TYPES = [
    "assistant", "callback", "car", "company_main", "custom", "grand_central", "home",
    "home_fax", "isdn", "main", "mobile", "other", "other_fax", "pager", "radio", "telex",
    "tty_tdd", "work", "work_fax", "work_mobile", "work_pager",
]
LANGUAGE_PREFERENCES = ["preferred", "not_preferred"]
OPERATING_SYSTEM_TYPES = ["linux", "unspecified", "windows"]
WEBSITE_TYPES = [
    "app_install_page", "blog", "custom", "ftp", "home", "home_page", "other", "profile",
    "reservations", "resume", "work",
]
LOCATION_TYPES = ["custom", "default", "desk"]
KEYWORD_TYPES = ["custom", "mission", "occupation", "outlook"]
IM_PROTOCOLS = [
    "aim", "custom_protocol", "gtalk", "icq", "jabber", "msn", "net_meeting", "qq", "skype", "yahoo",
]
IM_TYPES = ["custom", "home", "other", "work"]


def _custom_type(what: str = "value of type") -> String:
    return String(
        "custom_type",
        f"If the {what} is custom, this property contains the custom value and must be set.",
        optional=True,
    )


def _type(options: list[str], description: str) -> String:
    return String("type", description, required=True, validators=[StringInSlice(options)])


def _primary(what: str) -> Bool:
    return Bool("primary", f"Indicates if this is the user's primary {what}.", optional=True)


def _name() -> SingleNested:
    return SingleNested(
        "name",
        [
            String(
                "full_name",
                "The user's full name formed by concatenating the first and last name values.",
                computed=True,
            ),
            String(
                "family_name",
                "The user's last name.",
                required=True,
                validators=[StringLenBetween(1, NAME_PART_MAX)],
            ),
            String(
                "given_name",
                "The user's first name.",
                optional=True,
                validators=[StringLenBetween(1, NAME_PART_MAX)],
            ),
        ],
        "Holds the given and family names of the user, and the read-only full name value.",
        required=True,
    )


def _profile_lists() -> list[ListNested]:
    return [
        ListNested(
            "emails",
            [
                String("address", "The user's email address. Also serves as the email ID.", optional=True),
                _custom_type(),
                Bool("primary", "Indicates if this is the user's primary email.", optional=True, default=False),
                _type(EMAIL_TYPES, "The type of the email account."),
            ],
            "A list of the user's email addresses. The maximum allowed data size is 10Kb.",
            optional=True,
            computed=True,
        ),
        ListNested(
            "external_ids",
            [
                _custom_type("external ID type"),
                _type(EXTERNAL_ID_TYPES, "The type of external ID. If set to custom, customType must also be set."),
                String("value", "The value of the ID.", required=True),
            ],
            "A list of external IDs for the user, such as an employee or network ID.",
            optional=True,
        ),
        ListNested(
            "relations",
            [
                _custom_type(),
                _type(RELATION_TYPES, "The type of relation."),
                String("value", "The name of the person the user is related to.", required=True),
            ],
            "A list of the user's relationships to other users.",
            optional=True,
        ),
        ListNested(
            "addresses",
            [
                String("country", "Country.", optional=True),
                String("country_code", "The country code. Uses the ISO 3166-1 standard.", optional=True),
                _custom_type("address type"),
                String(
                    "extended_address",
                    "For extended addresses, such as an address that includes a sub-region.",
                    optional=True,
                ),
                String("formatted", "A full and unstructured postal address.", optional=True),
                String("locality", "The town or city of the address.", optional=True),
                String("po_box", "The post office box, if present.", optional=True),
                String("postal_code", "The ZIP or postal code, if applicable.", optional=True),
                _primary("address"),
                String("region", "The abbreviated province or state.", optional=True),
                Bool(
                    "source_is_structured",
                    "Indicates if the user-supplied address was formatted.",
                    optional=True,
                ),
                String("street_address", "The street address.", optional=True),
                _type(ADDRESS_TYPES, "The address type."),
            ],
            "A list of the user's addresses. The maximum allowed data size is 10Kb.",
            optional=True,
        ),
        ListNested(
            "organizations",
            [
                String("cost_center", "The cost center of the user's organization.", optional=True),
                _custom_type(),
                String("department", "Specifies the department within the organization.", optional=True),
                String("description", "The description of the organization.", optional=True),
                String("domain", "The domain the organization belongs to.", optional=True),
                Int64(
                    "full_time_equivalent",
                    "The full-time equivalent millipercent within the organization (100000 = 100%).",
                    optional=True,
                ),
                String("location", "The physical location of the organization.", optional=True),
                String("name", "The name of the organization.", optional=True),
                _primary("organization"),
                String("symbol", "Text string symbol of the organization.", optional=True),
                String("title", "The user's title within the organization.", optional=True),
                _type(ORGANIZATION_TYPES, "The type of organization."),
            ],
            "A list of organizations the user belongs to. The maximum allowed data size is 10Kb.",
            optional=True,
        ),
        ListNested(
            "phones",
            [
                _custom_type("phone number type"),
                _primary("phone number"),
                _type(PHONE_TYPES, "The type of phone number."),
                String("value", "A human-readable phone number.", required=True),
            ],
            "A list of the user's phone numbers. The maximum allowed data size is 1Kb.",
            optional=True,
        ),
        ListNested(
            "languages",
            [
                String(
                    "custom_language",
                    "Other language. A user can provide their own language name if there is no "
                    "corresponding language code.",
                    optional=True,
                ),
                String("language_code", "Language Code.", optional=True, default="en"),
                String(
                    "preference",
                    "Controls whether the specified language code is the user's preferred language.",
                    optional=True,
                    default="preferred",
                    validators=[StringInSlice(LANGUAGE_PREFERENCES)],
                ),
            ],
            "A list of the user's languages. The maximum allowed data size is 1Kb.",
            optional=True,
            computed=True,
        ),
        ListNested(
            "posix_accounts",
            [
                String("account_id", "A POSIX account field identifier.", optional=True),
                String("gecos", "The GECOS (user information) for this account.", optional=True),
                String("gid", "The default group ID.", optional=True),
                String("home_directory", "The path to the home directory for this account.", optional=True),
                String(
                    "operating_system_type",
                    "The operating system type for this account.",
                    optional=True,
                    validators=[StringInSlice(OPERATING_SYSTEM_TYPES)],
                ),
                Bool("primary", "If this is user's primary account within the SystemId.", optional=True),
                String("shell", "The path to the login shell for this account.", optional=True),
                String("system_id", "System identifier for which account Username or Uid apply to.", optional=True),
                String("uid", "The POSIX compliant user ID.", optional=True),
                String("username", "The username of the account.", optional=True),
            ],
            "A list of POSIX account information for the user.",
            optional=True,
        ),
        ListNested(
            "ssh_public_keys",
            [
                String("expiration_time_usec", "An expiration time in microseconds since epoch.", optional=True),
                String("fingerprint", "A SHA-256 fingerprint of the SSH public key.", computed=True),
                String("key", "An SSH public key.", required=True),
            ],
            "A list of SSH public keys. The maximum allowed data size is 10Kb.",
            optional=True,
        ),
        ListNested(
            "websites",
            [
                String("custom_type", "The custom type. Only used if the type is custom.", optional=True),
                Bool("primary", "If this is user's primary website or not.", optional=True),
                _type(WEBSITE_TYPES, "The type or purpose of the website."),
                String("value", "The URL of the website.", required=True),
            ],
            "A list of the user's websites. The maximum allowed data size is 2Kb.",
            optional=True,
        ),
        ListNested(
            "locations",
            [
                String("area", "Textual location.", optional=True),
                String("building_id", "Building identifier.", optional=True),
                _custom_type("location type"),
                String("desk_code", "Most specific textual code of individual desk location.", optional=True),
                String("floor_name", "Floor name/number.", optional=True),
                String("floor_section", "Floor section. More specific location within the floor.", optional=True),
                _type(LOCATION_TYPES, "The location type."),
            ],
            "A list of the user's locations. The maximum allowed data size is 10Kb.",
            optional=True,
        ),
        ListNested(
            "keywords",
            [
                String("custom_type", "Custom Type.", optional=True),
                _type(KEYWORD_TYPES, "Standard type of the keyword entry."),
                String("value", "Keyword.", required=True),
            ],
            "A list of the user's keywords. The maximum allowed data size is 1Kb.",
            optional=True,
        ),
        ListNested(
            "ims",
            [
                String(
                    "custom_protocol",
                    "If the protocol value is custom_protocol, this property holds the custom protocol's string.",
                    optional=True,
                ),
                _custom_type("IM type"),
                String("im", "The user's IM network ID.", optional=True),
                _primary("IM"),
                String(
                    "protocol",
                    "An IM protocol identifies the IM network.",
                    required=True,
                    validators=[StringInSlice(IM_PROTOCOLS)],
                ),
                _type(IM_TYPES, "The IM account type."),
            ],
            "The user's Instant Messenger (IM) accounts.",
            optional=True,
        ),
        ListNested(
            "custom_schemas",
            [
                String("schema_name", "The name of the schema.", required=True),
                MapOf(
                    "schema_values",
                    ValueKind.STRING,
                    "JSON encoded map that represents key/value pairs that correspond to the given schema.",
                    required=True,
                    validators=[StringIsJson()],
                ),
            ],
            "Custom fields of the user.",
            optional=True,
        ),
    ]


def user_schema() -> ResourceSchema:
    lists = {attribute.name: attribute for attribute in _profile_lists()}
    return ResourceSchema(
        f"{TYPE_PREFIX}user",
        "User resource manages Google Workspace Users. " + scope_note("admin.directory.user"),
        Block([
            resource_id("The unique ID for the user."),
            String(
                "primary_email",
                "The user's primary email address. The primaryEmail must be unique and cannot be an alias "
                "of another user.",
                required=True,
            ),
            String(
                "password",
                "Stores the password for the user account. Write-only; the API never returns it.",
                optional=True,
                sensitive=True,
                validators=[StringLenBetween(PASSWORD_MIN, PASSWORD_MAX)],
            ),
            String(
                "hash_function",
                "Stores the hash format of the password property: SHA-1, MD5, or crypt.",
                optional=True,
            ),
            Bool("is_admin", "Indicates a user with super administrator privileges.", optional=True, computed=True),
            Bool("is_delegated_admin", "Indicates if the user is a delegated administrator.", computed=True),
            Bool(
                "agreed_to_terms",
                "True if the user has completed an initial login and accepted the Terms of Service agreement.",
                computed=True,
            ),
            Bool("suspended", "Indicates if user is suspended.", optional=True),
            Bool(
                "change_password_at_next_login",
                "Indicates if the user is forced to change their password at next login.",
                optional=True,
            ),
            Bool("ip_allowlist", "If true, the user's IP address is added to the allow list.", optional=True),
            _name(),
            String("etag", "ETag of the resource.", computed=True),
            lists["emails"],
            lists["external_ids"],
            lists["relations"],
            ListOf("aliases", ValueKind.STRING, "List of the user's alias email addresses.", optional=True),
            Bool("is_mailbox_setup", "Indicates if the user's Google mailbox is created.", computed=True),
            String("customer_id", "The customer ID to retrieve all account users.", computed=True),
            lists["addresses"],
            lists["organizations"],
            String("last_login_time", "The last time the user logged into the user's account.", computed=True),
            lists["phones"],
            String("suspension_reason", "Has the reason a user account is suspended.", computed=True),
            String("thumbnail_photo_url", "Photo Url of the user.", computed=True),
            lists["languages"],
            lists["posix_accounts"],
            String("creation_time", "The time the user's account was created.", computed=True),
            ListOf(
                "non_editable_aliases",
                ValueKind.STRING,
                "List of the user's non-editable alias email addresses.",
                computed=True,
            ),
            lists["ssh_public_keys"],
            lists["websites"],
            lists["locations"],
            Bool(
                "include_in_global_address_list",
                "Indicates if the user's profile is visible in the Google Workspace global address list.",
                optional=True,
                default=True,
            ),
            lists["keywords"],
            String("deletion_time", "The time the user's account was deleted.", computed=True),
            String("thumbnail_photo_etag", "ETag of the user's photo.", computed=True),
            lists["ims"],
            lists["custom_schemas"],
            Bool("is_enrolled_in_2_step_verification", "Is enrolled in 2-step verification.", computed=True),
            Bool("is_enforced_in_2_step_verification", "Is 2-step verification enforced.", computed=True),
            Bool("archived", "Indicates if user is archived.", optional=True),
            String(
                "org_unit_path",
                "The full path of the parent organization associated with the user.",
                optional=True,
                computed=True,
            ),
            String("recovery_email", "Recovery email of the user.", optional=True),
            String("recovery_phone", "Recovery phone of the user, in E.164 format.", optional=True),
        ]),
    )
