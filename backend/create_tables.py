#!/usr/bin/env python3
"""
Script to create the workspace tables.
"""
import asyncio
import sys
from pathlib import Path

# Add the backend directory to Python path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))

import quicksearch.models  # noqa: F401  registers the tables on Base.metadata
from quicksearch.database import create_tables

async def main():
    """Create all database tables."""
    try:
        print("Creating workspace tables...")
        await create_tables()
        print("Workspace tables created successfully")
    except Exception as e:
        print(f"Error creating tables: {e}")
        return 1
    return 0

if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
