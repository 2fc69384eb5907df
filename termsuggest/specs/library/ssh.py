"""Completion spec for ssh."""

from termsuggest.models import ArgSpec, CommandSpec, OptionSpec, filepaths

spec = CommandSpec(
    name="ssh",
    description="OpenSSH remote login client",
    options=(
        OptionSpec("-i", "Identity file"),
        OptionSpec("-p", "Port to connect to on the remote host"),
        OptionSpec("-v", "Verbose mode"),
        OptionSpec("-L", "Local port forwarding"),
        OptionSpec("-F", "Alternative per-user configuration file"),
    ),
    args=ArgSpec(template="filepaths", generators=filepaths()),
)
