"""Course entity as exposed by the content store."""

from dataclasses import dataclass

from rise.domain.common.value_objects import CourseId, Language


@dataclass
class Course:
    """Bilingual course header. Lessons and exams are loaded separately."""

    id: CourseId
    title_en: str
    title_ti: str
    description_en: str | None = None
    description_ti: str | None = None

    def title_for(self, language: Language) -> str:
        """Title in the given language, falling back to English and then the id."""
        if language.value == "ti" and self.title_ti.strip():
            return self.title_ti
        if self.title_en.strip():
            return self.title_en
        return self.id.value
