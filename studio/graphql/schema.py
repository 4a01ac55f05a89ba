import strawberry

from studio.graphql.class_sessions.mutations import ClassSessionMutations
from studio.graphql.class_sessions.queries import ClassSessionQueries
from studio.graphql.instructors.mutations import InstructorMutations
from studio.graphql.instructors.queries import InstructorQueries
from studio.graphql.payroll.mutations import PayrollMutations
from studio.graphql.payroll.queries import PayrollQueries
from studio.graphql.settings.mutations import SettingsMutations
from studio.graphql.settings.queries import SettingsQueries
from studio.graphql.stats.queries import StatsQueries
from studio.graphql.students.mutations import StudentMutations
from studio.graphql.students.queries import StudentQueries


@strawberry.type
class Query(
    ClassSessionQueries,
    StudentQueries,
    InstructorQueries,
    PayrollQueries,
    SettingsQueries,
    StatsQueries,
):
    @strawberry.field
    def hello(self) -> str:
        return "Hello from GraphQL!"


@strawberry.type
class Mutation(
    ClassSessionMutations,
    StudentMutations,
    InstructorMutations,
    PayrollMutations,
    SettingsMutations,
):
    pass


schema = strawberry.Schema(query=Query, mutation=Mutation)
