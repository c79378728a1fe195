#!/usr/bin/env python3
"""
Database setup script for the University Attendance System
Creates the attendance tables, optionally resets them or loads the demo class
"""

import argparse
import sys

from app import create_app
from database import db, init_db, reset_database
from models import SchoolClass, Section, Student, AttendanceRecord

def table_counts():
    """Row counts of the tables the attendance export reads"""
    return {
        'classes': db.session.query(SchoolClass).count(),
        'sections': db.session.query(Section).count(),
        'students': db.session.query(Student).count(),
        'attendance records': db.session.query(AttendanceRecord).count(),
    }

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Set up the attendance database')
    parser.add_argument('--reset', action='store_true',
                        help='drop and recreate every table (asks for confirmation)')
    parser.add_argument('--seed', action='store_true',
                        help='load the demo class, sections, students and attendance')
    parser.add_argument('--yes', action='store_true', help='do not ask before resetting')
    return parser.parse_args(argv)

def run(app, args):
    """Apply the requested setup steps and return the resulting table counts"""
    if args.reset:
        confirmed = args.yes or input("Drop all attendance data? (yes/no): ").lower() == 'yes'
        if not confirmed:
            print("Database reset cancelled.")
            return None
        reset_database(app)
    else:
        init_db(app)

    with app.app_context():
        if args.seed:
            from sample_data import create_sample_data
            if SchoolClass.query.filter_by(code='CS101').first():
                print("Demo class CS101 already present, skipping seed.")
            else:
                create_sample_data()

        return table_counts()

def main(argv=None):
    counts = run(create_app(), parse_args(argv))
    if counts is None:
        return 1
    for table, count in counts.items():
        print(f"  {table}: {count}")
    return 0

if __name__ == '__main__':
    sys.exit(main())
