"""Exception taxonomy for the number ontology.

All failures are contract violations raised synchronously at construction
or call time. Nothing here is transient, so nothing is ever retried.
"""


class OntologyError(Exception):
    """Base class for errors raised by ontonum."""


class InvalidArgument(OntologyError, ValueError):
    """An argument is absent, of the wrong kind, or outside its domain.

    Raised for absent members, negative Naturals, non-finite Reals and
    negative bases or exponents in factored integers.
    """


class DomainViolation(OntologyError, ValueError):
    """A kind fixed to one sign was asked to change it (e.g. a negative Natural)."""
