import csv

from ...application.models import CSVOptions


def csv_format_params(options: CSVOptions) -> dict[str, object]:
    """Keyword arguments for ``csv.reader``/``csv.writer`` built from options."""
    params: dict[str, object] = {
        "delimiter": options.delimiter,
        "lineterminator": options.line_terminator,
        "escapechar": options.escape_char,
        "doublequote": options.escape_char is None,
    }
    if options.quote_char is None:
        params["quoting"] = csv.QUOTE_NONE
    else:
        params["quotechar"] = options.quote_char
        params["quoting"] = csv.QUOTE_MINIMAL
    return params
