"""Core constants: shared literal values.

Default admin accounts seeded into an empty admins collection and the
default salary credit date written on new employments.
"""

DEFAULT_SALARY_CREDIT_DATE = "1st of every month"

# Seeded only when the admins collection is empty. Passwords come from the
# environment (see scripts.seed_admins); these are names, mobiles and roles.
DEFAULT_ADMINS: tuple[dict[str, str], ...] = (
    {"name": "Super Admin", "mobile": "8806431723", "role": "super_admin"},
    {"name": "Admin", "mobile": "8459719119", "role": "admin"},
)
