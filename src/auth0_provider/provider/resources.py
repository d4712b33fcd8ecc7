"""Resource types registered with the host runtime."""

RESOURCE_TYPES: tuple[str, ...] = (
    "auth0_client",
    "auth0_client_grant",
    "auth0_connection",
    "auth0_custom_domain",
    "auth0_resource_server",
    "auth0_rule",
    "auth0_rule_config",
    "auth0_hook",
    "auth0_prompt",
    "auth0_email",
    "auth0_email_template",
    "auth0_user",
    "auth0_tenant",
    "auth0_role",
    "auth0_log_stream",
    "auth0_branding",
    "auth0_guardian",
    "auth0_action",
    "auth0_flow",
)
