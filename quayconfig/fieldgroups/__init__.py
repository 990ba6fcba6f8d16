"""Configuration field groups, one module per group."""

__all__ = [
    "googlelogin",
    "hostsettings",
    "jwtauthentication",
    "ldap",
    "oidc",
    "quaydocumentation",
    "redis",
    "repomirror",
    "securityscanner",
    "teamsyncing",
    "timemachine",
    "uservisiblesettings",
]