"""sqlquirks

Backend quirks for running one SQL/columnar conformance suite against many
database backends. Each backend answers the same small set of questions
(how to connect, how it folds identifiers, which catalog and timestamp
precision it reports, how Arrow types map to its SQL type names) so the
shared suite never needs a backend-specific branch.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
