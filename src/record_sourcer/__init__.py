"""Record Sourcer - generalize scraped genealogy records and cite them.

Site readers turn each website's extracted data into one generalized
record model, and the citation builder renders that model as inline,
source or narrative citations for a wiki genealogy platform.
"""

__version__ = "0.1.0"

# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "models":
        from record_sourcer import models
        return models
    if name == "readers":
        from record_sourcer import readers
        return readers
    if name == "citation":
        from record_sourcer import citation
        return citation
    if name == "generalize":
        from record_sourcer import generalize
        return generalize
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
