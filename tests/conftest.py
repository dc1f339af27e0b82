"""
Root pytest configuration for reqres-probe.

The api_client and probe_settings fixtures come from the reqres_probe pytest
plugin (registered through the pytest11 entry point).
"""
