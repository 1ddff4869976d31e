"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. These names are shared with the web
client, so they must not change.
"""

COLLECTION_ADMINS = "admins"
COLLECTION_EMPLOYEES = "employees"
COLLECTION_EMPLOYMENTS = "employments"
COLLECTION_SALARY_HISTORY = "salaryHistory"
