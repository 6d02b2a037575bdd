"""Runtime primitives shared by every i18nctl command."""
