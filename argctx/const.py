VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "argctx"
DESCRIPTION = "Resolve command-line flags into typed values and positional arguments"
EXTRA_ARGS_ENV = "ARGCTX_EXTRA_ARGS"
MANIFEST_SUFFIXES = [".json", ".toml"]
