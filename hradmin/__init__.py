"""HR admin backend: admin-scoped, cached access to employee records."""
