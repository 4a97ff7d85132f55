from wtforms import FieldList, Form, FormField, SelectField, StringField
from wtforms.validators import NumberRange, Optional

from calctech.forms import CalculatorForm, FiniteFloatField
from calctech.projects.education.core.grades import GRADE_POINTS

MAX_ROWS = 50


class AssignmentEntryForm(Form):
    name = StringField("Assignment", validators=[Optional()])
    score = FiniteFloatField("Score", validators=[Optional(), NumberRange(min=0)])
    max_score = FiniteFloatField("Out of", validators=[Optional(), NumberRange(min=0)])
    weight = FiniteFloatField("Weight (%)", validators=[Optional(), NumberRange(min=0, max=100)])


class CourseEntryForm(Form):
    name = StringField("Course", validators=[Optional()])
    grade = SelectField("Grade", choices=[(g, g) for g in GRADE_POINTS], default="A")
    credits = FiniteFloatField("Credits", validators=[Optional(), NumberRange(min=0)])


class GradeForm(CalculatorForm):
    assignments = FieldList(
        FormField(AssignmentEntryForm),
        max_entries=MAX_ROWS,
        default=[
            {"name": "Homework", "score": 85, "max_score": 100, "weight": 20},
            {"name": "Midterm Exam", "score": 78, "max_score": 100, "weight": 30},
            {"name": "Project", "score": 92, "max_score": 100, "weight": 25},
        ],
    )
    final_exam_weight = FiniteFloatField(
        "Final Exam Weight (%)",
        validators=[Optional(), NumberRange(min=0, max=100)],
        default=25,
    )


class GPAForm(CalculatorForm):
    courses = FieldList(
        FormField(CourseEntryForm),
        max_entries=MAX_ROWS,
        default=[
            {"name": "Course 1", "grade": "A", "credits": 3},
            {"name": "Course 2", "grade": "B", "credits": 3},
            {"name": "Course 3", "grade": "A-", "credits": 4},
        ],
    )
    scale = SelectField("Grade Scale", choices=[("4.0", "4.0 scale"), ("5.0", "5.0 weighted scale")],
                        default="4.0")
