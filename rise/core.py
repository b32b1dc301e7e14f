from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from rise.application.certification.services.certificate_display_service import (
    CertificateDisplayService,
)
from rise.application.certification.use_cases.claim_certificate_use_case import (
    ClaimCertificateUseCase,
)
from rise.application.certification.use_cases.evaluate_eligibility_use_case import (
    EvaluateEligibilityUseCase,
)
from rise.application.certification.use_cases.get_certificate_status_use_case import (
    GetCertificateStatusUseCase,
)
from rise.application.certification.use_cases.get_course_overview_use_case import (
    GetCourseOverviewUseCase,
)
from rise.application.certification.use_cases.list_certificates_use_case import (
    ListCertificatesUseCase,
)
from rise.application.certification.use_cases.render_certificate_use_case import (
    RenderCertificateUseCase,
)
from rise.application.certification.use_cases.verify_certificate_use_case import (
    VerifyCertificateUseCase,
)
from rise.application.learning.use_cases.exams.get_exam_status_use_case import (
    GetExamStatusUseCase,
)
from rise.application.learning.use_cases.exams.get_exam_use_case import GetExamUseCase
from rise.application.learning.use_cases.exams.submit_exam_use_case import SubmitExamUseCase
from rise.application.learning.use_cases.progress.get_course_progress_use_case import (
    GetCourseProgressUseCase,
)
from rise.application.learning.use_cases.progress.update_lesson_progress_use_case import (
    UpdateLessonProgressUseCase,
)
from rise.config import get_settings
from rise.infrastructure.certification.repositories import CertificateRepository, UserDirectory
from rise.infrastructure.certification.services import PdfCertificateRenderer
from rise.infrastructure.content.repositories import CourseContentRepository
from rise.infrastructure.learning.repositories import ExamAttemptRepository, ProgressRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    content_repository = providers.Factory(CourseContentRepository, db=db)
    progress_repository = providers.Factory(ProgressRepository, db=db)
    attempt_repository = providers.Factory(ExamAttemptRepository, db=db)
    certificate_repository = providers.Factory(CertificateRepository, db=db)
    user_directory = providers.Factory(UserDirectory, db=db)

    # External services
    certificate_renderer = providers.Singleton(
        PdfCertificateRenderer,
        font_path=settings.provided.CERTIFICATE_FONT_PATH,
    )

    # Learning module, application use cases
    update_lesson_progress_use_case = providers.Factory(
        UpdateLessonProgressUseCase,
        progress_repository=progress_repository,
        content_repository=content_repository,
    )
    get_course_progress_use_case = providers.Factory(
        GetCourseProgressUseCase,
        progress_repository=progress_repository,
    )
    get_exam_use_case = providers.Factory(
        GetExamUseCase,
        content_repository=content_repository,
        attempt_repository=attempt_repository,
        default_language=settings.provided.DEFAULT_LANGUAGE,
    )
    submit_exam_use_case = providers.Factory(
        SubmitExamUseCase,
        content_repository=content_repository,
        attempt_repository=attempt_repository,
        default_language=settings.provided.DEFAULT_LANGUAGE,
    )
    get_exam_status_use_case = providers.Factory(
        GetExamStatusUseCase,
        attempt_repository=attempt_repository,
    )

    # Certification module, application use cases
    evaluate_eligibility_use_case = providers.Factory(
        EvaluateEligibilityUseCase,
        content_repository=content_repository,
        progress_repository=progress_repository,
        attempt_repository=attempt_repository,
    )
    claim_certificate_use_case = providers.Factory(
        ClaimCertificateUseCase,
        certificate_repository=certificate_repository,
        eligibility_use_case=evaluate_eligibility_use_case,
    )
    get_certificate_status_use_case = providers.Factory(
        GetCertificateStatusUseCase,
        certificate_repository=certificate_repository,
        eligibility_use_case=evaluate_eligibility_use_case,
        api_prefix=settings.provided.API_V1_PREFIX,
    )
    list_certificates_use_case = providers.Factory(
        ListCertificatesUseCase,
        certificate_repository=certificate_repository,
        content_repository=content_repository,
    )
    get_course_overview_use_case = providers.Factory(
        GetCourseOverviewUseCase,
        content_repository=content_repository,
        certificate_repository=certificate_repository,
        eligibility_use_case=evaluate_eligibility_use_case,
    )
    certificate_display_service = providers.Factory(
        CertificateDisplayService,
        content_repository=content_repository,
        user_directory=user_directory,
    )
    verify_certificate_use_case = providers.Factory(
        VerifyCertificateUseCase,
        certificate_repository=certificate_repository,
        display_service=certificate_display_service,
        default_language=settings.provided.DEFAULT_LANGUAGE,
    )
    render_certificate_use_case = providers.Factory(
        RenderCertificateUseCase,
        claim_use_case=claim_certificate_use_case,
        display_service=certificate_display_service,
        renderer=certificate_renderer,
        public_base_url=settings.provided.PUBLIC_BASE_URL,
        api_prefix=settings.provided.API_V1_PREFIX,
        organization_name=settings.provided.CERTIFICATE_ORGANIZATION,
        default_language=settings.provided.DEFAULT_LANGUAGE,
    )


container = Container()
