"""Centralized environment variable loading utility.

This module provides a single function to load environment variables
before settings are read.
"""

from pathlib import Path
from dotenv import load_dotenv


def load_environment_variables(project_dir: Path = None) -> bool:
    """Load environment variables from .env file.
    
    Checks for .env file in parent directory first, then in project directory.
    
    Args:
        project_dir: Project root directory. If None, calculates from this file.
    
    Returns:
        True if a .env file was found and loaded, False otherwise
    """
    if project_dir is None:
        # cabfare/config -> cabfare -> project root
        project_dir = Path(__file__).parent.parent.parent
    
    env_file = project_dir.parent / ".env"
    
    if env_file.exists():
        return load_dotenv(env_file)
    if (project_dir / ".env").exists():
        return load_dotenv(project_dir / ".env")
    return False
