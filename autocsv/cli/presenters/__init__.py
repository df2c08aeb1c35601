from .schema_table import SchemaPresenter

__all__ = ["SchemaPresenter"]
