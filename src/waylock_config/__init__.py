"""waylock-config -- locate and parse the waylock TOML configuration file."""

__version__ = '0.1.0'
