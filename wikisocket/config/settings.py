"""Defaults and key names for the wiki settings collaborator.

The settings collaborator is the source of truth for community-level
settings. The environment values below seed the default env-backed store
used when no other store is wired in.

Keys sent to every client (GlobalSettings):
    community_name:  Wiki name shown at the top of every page.
    welcome_message: Message shown on the home page.
    public_access:   Whether anonymous connections may read discussions.
                     Only the exact string "true" enables it.

Keys kept on the server (ServerSettings):
    port:           Port the server listens on.
    email_address:  Sender address for outgoing wiki mail.
    site_address:   Public URL used when building links in emails.
"""

from __future__ import annotations

SETTING_COMMUNITY_NAME = "community_name"
SETTING_WELCOME_MESSAGE = "welcome_message"
SETTING_PUBLIC_ACCESS = "public_access"
SETTING_PORT = "port"
SETTING_EMAIL_ADDRESS = "email_address"
SETTING_SITE_ADDRESS = "site_address"

SETTING_KEYS = (
    SETTING_COMMUNITY_NAME,
    SETTING_WELCOME_MESSAGE,
    SETTING_PUBLIC_ACCESS,
    SETTING_PORT,
    SETTING_EMAIL_ADDRESS,
    SETTING_SITE_ADDRESS,
)

# Environment variable backing each key in the default store
SETTING_ENV_VARS = {
    SETTING_COMMUNITY_NAME: "WIKI_COMMUNITY_NAME",
    SETTING_WELCOME_MESSAGE: "WIKI_WELCOME_MESSAGE",
    SETTING_PUBLIC_ACCESS: "WIKI_PUBLIC_ACCESS",
    SETTING_PORT: "WIKI_PORT",
    SETTING_EMAIL_ADDRESS: "WIKI_EMAIL_ADDRESS",
    SETTING_SITE_ADDRESS: "WIKI_SITE_ADDRESS",
}

PUBLIC_ACCESS_ENABLED_VALUE = "true"

# Values used by the default store when the environment is silent
SETTING_DEFAULTS = {
    SETTING_COMMUNITY_NAME: "Wiki",
    SETTING_WELCOME_MESSAGE: "",
    SETTING_PUBLIC_ACCESS: "false",
}


__all__ = [
    "SETTING_COMMUNITY_NAME",
    "SETTING_WELCOME_MESSAGE",
    "SETTING_PUBLIC_ACCESS",
    "SETTING_PORT",
    "SETTING_EMAIL_ADDRESS",
    "SETTING_SITE_ADDRESS",
    "SETTING_KEYS",
    "SETTING_ENV_VARS",
    "PUBLIC_ACCESS_ENABLED_VALUE",
    "SETTING_DEFAULTS",
]
