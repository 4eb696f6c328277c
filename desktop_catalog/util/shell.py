"""Process spawning and executable lookup."""

import os
import shutil
import subprocess


def find_executable(name: str, executable_dirs: list[str] | None = None) -> str | None:
    """
    Locate an executable the way a shell would.
    
    Args:
        name: Program name or path (absolute paths are checked directly)
        executable_dirs: Directories to search, in order (None means $PATH)
    
    Returns:
        Full path to the executable, or None if it is not installed
    
    Example:
        >>> find_executable("sh")
        '/usr/bin/sh'
    """
    path = None if executable_dirs is None else os.pathsep.join(executable_dirs)
    return shutil.which(name, path=path)


def spawn(command: str, cwd: str | None = None) -> subprocess.Popen:
    """
    Start a command through the shell without waiting for it.
    
    The child gets its own session and no inherited stdio, so it outlives
    the caller and never blocks on our terminal.
    
    Args:
        command: Command line interpreted by /bin/sh
        cwd: Working directory for the child
    
    Returns:
        Handle of the started process
    
    Raises:
        OSError: If the process cannot be started (e.g. cwd does not exist)
    """
    return subprocess.Popen(
        command,
        shell=True,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True
    )
