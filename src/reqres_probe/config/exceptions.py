"""
Exception classes with built-in guidance for configuration loading.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, setting_name: str = None, source: str = None):
        super().__init__(message)
        self.setting_name = setting_name
        self.source = source
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class InvalidSettingException(ConfigException):
    """Raised when a setting value fails validation."""
    def __init__(self, message: str, setting_name: str, source: str = None, env_var: str = None):
        self.env_var = env_var
        super().__init__(message, setting_name=setting_name, source=source)

    def _generate_guidance(self):
        where = self.source or 'defaults'
        fix_env = f"\n   2. Or fix the {self.env_var} environment variable" if self.env_var else ""
        return f"""
❌ Invalid value for setting '{self.setting_name}' (from {where}): {self}
💡 Resolve this in one of the following ways:
   1. Correct '{self.setting_name}' in probe.yaml{fix_env}
"""


class ConfigFileException(ConfigException):
    """Raised when the YAML configuration file cannot be read or parsed."""
    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message, source=path)

    def _generate_guidance(self):
        return f"""
❌ Could not load configuration file {self.path}: {self}
💡 Fix the YAML syntax, or point PROBE_CONFIG at a valid file
"""


class InMemoryAppNotConfiguredException(ConfigException):
    """Raised when IN_MEMORY mode is selected but no app module is configured."""
    def __init__(self, message: str):
        super().__init__(message, setting_name='app_module')

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ In-memory testing requires an ASGI app to run the scenarios against
💡 Resolve this in one of the following ways:
   1. Set TEST_API_APP: export TEST_API_APP=tests.unit.fake_reqres:app
   2. Or add 'app_module: tests.unit.fake_reqres:app' to probe.yaml
   3. Or test the live service instead: {command} --api-mode=REMOTE
"""
