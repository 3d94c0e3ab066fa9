"""
Seed data script for the School Records system.
Creates sample data for testing and demonstration.
"""
from datetime import date
import random
from database import (
    get_db_context, init_db,
    Gender, Teacher, SchoolClass, Student, Subject, Trimester, Grade
)


def seed_database():
    """Populate database with sample data."""

    with get_db_context() as db:
        # Clear existing data
        db.query(Grade).delete()
        db.query(Student).delete()
        db.query(SchoolClass).delete()
        db.query(Teacher).delete()
        db.query(Subject).delete()
        db.query(Trimester).delete()

        # Create Teachers
        teachers = [
            Teacher(last_name="Lefebvre", first_name="Claire", birth_date=date(1980, 3, 14), gender=Gender.FEMME),
            Teacher(last_name="Moreau", first_name="Julien", birth_date=date(1975, 11, 2), gender=Gender.HOMME),
            Teacher(last_name="Garnier", first_name="Sophie", birth_date=date(1988, 6, 21), gender=Gender.FEMME),
        ]
        db.add_all(teachers)
        db.flush()

        # Create Classes: the third teacher has no homeroom class
        classes = [
            SchoolClass(name="CM1-A", teacher_id=teachers[0].id),
            SchoolClass(name="CM2-B", teacher_id=teachers[1].id),
        ]
        db.add_all(classes)
        db.flush()

        # Create Students
        students = [
            Student(last_name="Martin", first_name="Lucas", class_id=classes[0].id,
                    birth_date=date(2014, 4, 9), gender=Gender.HOMME),
            Student(last_name="Durand", first_name="Emma", class_id=classes[0].id,
                    birth_date=date(2014, 8, 30), gender=Gender.FEMME, address="12 rue des Lilas"),
            Student(last_name="Bernard", first_name="Hugo", class_id=classes[0].id,
                    birth_date=date(2014, 1, 17), gender=Gender.HOMME),
            Student(last_name="Petit", first_name="Chloé", class_id=classes[1].id,
                    birth_date=date(2013, 10, 5), gender=Gender.FEMME),
            Student(last_name="Roux", first_name="Nathan", class_id=classes[1].id,
                    birth_date=date(2013, 2, 25), gender=Gender.HOMME),
        ]
        db.add_all(students)
        db.flush()

        # Create Subjects
        subjects = [
            Subject(name="Mathématiques"),
            Subject(name="Français"),
            Subject(name="Histoire"),
        ]
        db.add_all(subjects)
        db.flush()

        # Create Trimesters
        trimesters = [
            Trimester(name="T1", date=date(2025, 9, 1)),
            Trimester(name="T2", date=date(2026, 1, 5)),
            Trimester(name="T3", date=date(2026, 4, 13)),
        ]
        db.add_all(trimesters)
        db.flush()

        # Create sample grades: the homeroom teacher grades the first two
        # subjects, the third teacher grades history in every class
        grades = []
        for student in students[:-1]:  # Last student has no grade
            homeroom = next(c for c in classes if c.id == student.class_id)
            for trimester in trimesters[:2]:
                for subject in subjects[:2]:
                    grades.append(Grade(
                        student_id=student.id,
                        class_id=student.class_id,
                        subject_id=subject.id,
                        teacher_id=homeroom.teacher_id,
                        trimester_id=trimester.id,
                        score=round(random.uniform(8, 20), 1),
                        coefficient=random.choice([1, 2, 3]),
                    ))
                grades.append(Grade(
                    student_id=student.id,
                    class_id=student.class_id,
                    subject_id=subjects[2].id,
                    teacher_id=teachers[2].id,
                    trimester_id=trimester.id,
                    score=round(random.uniform(8, 20), 1),
                    coefficient=1,
                ))

        db.add_all(grades)
        db.commit()

        print("Database seeded successfully!")
        print(f"Created:")
        print(f"  - {len(teachers)} teachers")
        print(f"  - {len(classes)} classes")
        print(f"  - {len(students)} students")
        print(f"  - {len(subjects)} subjects")
        print(f"  - {len(trimesters)} trimesters")
        print(f"  - {len(grades)} grades")

        # Print some IDs for reference
        print("\nReference IDs:")
        print(f"  Teachers: {[(t.id, t.last_name) for t in teachers]}")
        print(f"  Classes: {[(c.id, c.name) for c in classes]}")
        print(f"  Trimesters: {[(t.id, t.name) for t in trimesters]}")


if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Seeding database...")
    seed_database()
