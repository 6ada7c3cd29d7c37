#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data through the operation table

Features:
1. Create Users - two demo users sharing DEFAULT_PASSWORD
2. Create Layout - one cinema with one theater (Standard rows + a Premium row)
3. Create Showing - one movie with one evening show in that theater

Notes:
- Run `python script/reset_database.py` first for an empty schema
"""

import asyncio
from datetime import date, time, timedelta

from src.platform.config.di import cleanup, container
from src.service.cinema.driving_adapter.operation_table import OperationTable


DEFAULT_PASSWORD = 'P@ssw0rd'

DEMO_USERS = [
    ('ann@example.com', 'Ann', '0911000001'),
    ('bob@example.com', 'Bob', '0911000002'),
]

# (seat class, seats) per row
THEATER_ROWS = [('Standard', 10), ('Standard', 10), ('Premium', 8)]


async def _create_users(table: OperationTable) -> None:
    print(f'👥 Creating {len(DEMO_USERS)} users...')
    for email, name, phone in DEMO_USERS:
        user = await table.run(
            'register_user', email=email, name=name, phone=phone, password=DEFAULT_PASSWORD
        )
        print(f'   ✅ Created user: {user.email}')
    print(f'   📧 Credentials: {DEFAULT_PASSWORD}')


async def _create_layout(table: OperationTable) -> int:
    print('🏢 Creating cinema layout...')
    cinema = await table.run('add_cinema', name='Downtown')

    seats, seat_number = [], 1
    for seat_class, count in THEATER_ROWS:
        for _ in range(count):
            seats.append((seat_number, seat_class))
            seat_number += 1

    layout = await table.run('add_theater', cinema_id=cinema.id, name='Hall 1', seats=seats)
    print(f'   ✅ Created theater: ID={layout.theater.id}, Seats={len(layout.seats)}')
    return layout.theater.id


async def _create_showing(table: OperationTable, theater_id: int) -> None:
    print('🎞️  Creating showing...')
    showing = await table.run(
        'add_movie_showing',
        title='Dune',
        release_date=date(2021, 10, 22),
        duration=155 * 60,
        language='en',
        genre='Sci-Fi',
        country='US',
        show_date=date.today() + timedelta(days=1),
        start_time=time(19, 0),
        end_time=time(21, 45),
        theater_id=theater_id,
    )
    print(f'   ✅ Created show: ID={showing.show.id}, Date={showing.show.show_date}')


async def main():
    table = OperationTable(container)
    try:
        await _create_users(table)
        print()
        theater_id = await _create_layout(table)
        print()
        await _create_showing(table, theater_id)
        print()
        print('✅ All data committed successfully!')
    except Exception as e:
        print(f'❌ Seed failed: {e}')
        exit(1)
    finally:
        await cleanup()


if __name__ == '__main__':
    asyncio.run(main())
