#!/usr/bin/env python3
"""
Database Reset Script
Reset the cinema database structure

Features:
1. Drop every table of the cinema schema
2. Create the latest schema from the ORM models

Notes:
- This script only resets database structure, does not seed data
- To seed demo data, run `python script/seed_data.py`
"""

import asyncio

from src.platform.config.core_setting import settings
from src.platform.database.db_setting import (
    Database,
    create_db_and_tables,
    drop_db_and_tables,
)


async def main():
    print('🔄 Starting database reset...')
    print(f'   🗄️  {settings.DATABASE_URL_ASYNC.split("@")[-1]}')
    print('=' * 50)

    database = Database()
    try:
        await drop_db_and_tables(database.engine)
        print('   ✅ Tables dropped')

        await create_db_and_tables(database.engine)
        print('   ✅ Tables created')

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)
    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
