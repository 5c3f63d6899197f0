"""Service Layer — generic CRUD service and the per-entity resource specs."""
