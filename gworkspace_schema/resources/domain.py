"""Domains and domain aliases."""
from __future__ import annotations

from ..core.schema import Block, Bool, Int64, ListOf, ResourceSchema, String
from ..core.values import ValueKind
from .common import TYPE_PREFIX, resource_id, scope_note


def domain_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}domain",
        "Domain resource manages Google Workspace Domains. " + scope_note("admin.directory.domain"),
        Block([
            ListOf("domain_aliases", ValueKind.STRING, "List of domain alias objects.", computed=True),
            Bool("verified", "Indicates the verification state of a domain.", computed=True),
            Int64("creation_time", "Creation time of the domain. Expressed in Unix time format.", computed=True),
            Bool("is_primary", "Indicates if the domain is a primary domain.", computed=True),
            String("domain_name", "The domain name of the customer.", required=True),
            resource_id("Domain identifier"),
        ]),
    )


def domain_alias_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}domain_alias",
        "Domain Alias resource manages Google Workspace Domain Aliases. " + scope_note("admin.directory.domain"),
        Block([
            String(
                "parent_domain_name",
                "The parent domain name that the domain alias is associated with. This can either be "
                "a primary or secondary domain name within a customer.",
                optional=True,
            ),
            Bool("verified", "Indicates the verification state of a domain alias.", computed=True),
            Int64("creation_time", "Creation time of the domain alias.", computed=True),
            String("etag", "ETag of the resource.", computed=True),
            String("domain_alias_name", "The domain alias name.", required=True),
            resource_id(),
        ]),
    )
