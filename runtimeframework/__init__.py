"""
runtimeframework: runtime identities and their compatibility rules.

This package provides:
- A Version type with separate ordering and "unspecified matches anything" rules
- Platform families (.NET, Mono, Any) that map framework versions to CLR versions
- RuntimeFramework identities such as 'net-4.5', with parsing, display names
  and the supports / can_load predicates
- A small service that picks a suitable framework from a configured list
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
