"""TaxCalc - Withholding tax lookup and computation service.

TaxCalc exposes a four-level tax taxonomy (section, subsection, category,
subcategory) over HTTP and computes the withholding tax due on a gross
amount for a selected subcategory and taxpayer filer status.

Architecture Overview:
- **API Layer**: FastAPI routers, schemas and middleware
- **Core Layer**: Configuration, logging, tracing and the error model
- **Domain Layer**: Taxonomy queries and the tax computation
- **Infrastructure Layer**: Async PostgreSQL access through SQLAlchemy

The taxonomy is reference data provisioned outside the service; every
request is a read followed, at most, by one arithmetic step.
"""
