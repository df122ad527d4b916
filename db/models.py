# db/models.py
"""
Supabase does not require ORM model classes.
Tables created in your Supabase dashboard:

Table: customers
- id (uuid, PK, default gen_random_uuid())
- user_id (uuid, owner)
- name (text)
- email (text, nullable)
- phone (text, nullable)

Table: quotations
- id (uuid, PK, default gen_random_uuid())
- user_id (uuid, owner)
- customer_id (uuid, FK → customers.id)
- destination (text)
- travel_start_date (date)
- travel_end_date (date)
- number_of_adults (int)
- number_of_children (int)
- notes (text, nullable)
- status (text: draft | sent | approved | rejected)
- total_amount (numeric, default 0)
- created_at (timestamptz)
"""

CUSTOMERS_TABLE = "customers"
QUOTATIONS_TABLE = "quotations"

# PostgREST embed used for the quotation listing
QUOTATION_WITH_CUSTOMER_COLUMNS = "*, customer:customers(name, email)"
