"""Services for selffit."""
