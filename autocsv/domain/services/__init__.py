"""Domain services for the record/CSV mapping engine."""

from .header_reconciler import HeaderReconciler, ReconcileResult
from .row_materializer import RowMaterializer
from .schema_resolver import SchemaBuilder, SchemaResolver
from .serializer import RecordSerializer

__all__ = [
    "HeaderReconciler",
    "ReconcileResult",
    "RecordSerializer",
    "RowMaterializer",
    "SchemaBuilder",
    "SchemaResolver",
]
