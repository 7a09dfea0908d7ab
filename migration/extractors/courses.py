"""
Courses extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from migration.transformers import null_bool, null_str
from models import Course
from models import source
from schemas.rows import CourseRow


class CoursesExtractor(EntityExtractor):
    name = "courses"
    model = Course
    source_table = source.courses
    
    def transform(self, record: Mapping[str, Any]) -> CourseRow:
        return CourseRow(
            course_id=record["courseID"],
            course=null_str(record["course"]),
            direction=null_str(record["direction"]),
            is_aw=null_bool(record["isAw"]),
            code=null_str(record["code"]),
        )
