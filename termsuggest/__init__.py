"""termsuggest - spec-driven command line completion.

Matches a partially typed command line against a library of declarative
command specs (commands, subcommands, options and argument suggestions)
and returns positioned completion candidates. Specs are only loaded for
commands available on the system.
"""
