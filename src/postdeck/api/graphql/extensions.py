from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from postdeck.core.exceptions import PostDeckException


def format_postdeck_error(error: GraphQLError) -> GraphQLError:
    """PostDeckException kaynaklı hatalara error_code ve status_code extension'larını ekler."""
    original = error.original_error
    if not isinstance(original, PostDeckException):
        return error

    return GraphQLError(
        original.error_message,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=original,
        extensions={"code": original.error_code, "status_code": original.status_code},
    )


class PostDeckErrorExtension(SchemaExtension):
    def on_operation(self):
        yield
        result = self.execution_context.result
        if result is None or not getattr(result, "errors", None):
            return
        result.errors = [format_postdeck_error(error) for error in result.errors]
