"""Binary to decimal converter desktop application."""
