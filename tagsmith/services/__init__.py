"""Release services.

Services coordinate the external tools (git, git-cliff, the package
manager) behind the release workflow. They report through a
ConsoleProtocol and return Result values; they never exit the process.
"""
