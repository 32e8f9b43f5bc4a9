"""Route catalog — a fixed, spring.io-shaped URL space.

``generate_routes()`` returns the same definitions, in the same order,
on every call. Literal and templated routes are interleaved so the
matchers exercise both plain string comparison and specificity ranking.
"""

from collections.abc import Sequence

from pathbench.errors import ConfigurationError
from pathbench.matching.protocol import PathMatcher
from pathbench.routing.route import LiteralRoute, Route, TemplatedRoute


def generate_routes() -> list[Route]:
    """Build a fresh catalog. Raises ``ConfigurationError`` on invariant violations."""
    routes: list[Route] = [
        LiteralRoute("/404"),
        LiteralRoute("/500"),
        LiteralRoute("/platform"),
        LiteralRoute("/services"),
        LiteralRoute("/signin"),
        LiteralRoute("/**"),
        LiteralRoute("/blog.atom"),
        TemplatedRoute(
            "/blog/category/{category}.atom",
            (
                "/blog/category/releases.atom",
                "/blog/category/engineering.atom",
                "/blog/category/news.atom",
            ),
        ),
        LiteralRoute("/blog/broadcasts.atom"),
        LiteralRoute("/blog"),
        TemplatedRoute(
            r"/blog/{year:\d+}/{month:\d+}/{day:\d+}/{slug}",
            (
                "/blog/2017/02/09/spring-cloud-pipelines-1-0-0-m3-released",
                "/blog/2017/02/06/springone-platform-2016-replay-spring-for-apache-kafka",
                "/blog/2017/02/06/spring-for-apache-kafka-1-1-3-available-now",
                "/blog/2017/02/06/spring-cloud-camden-sr5-is-available",
                "/blog/2017/02/01/spring-team-at-devnexus-2017",
                "/blog/2017/02/01/spring-io-platform-athens-sr3",
            ),
        ),
        LiteralRoute("/blog/broadcasts"),
        TemplatedRoute(
            r"/blog/{year:\d+}/{month:\d+}",
            ("/blog/2017/02", "/blog/2017/01", "/blog/2016/12", "/blog/2016/11"),
        ),
        LiteralRoute("/docs/reference"),
        LiteralRoute("/docs"),
        LiteralRoute("/webhook/docs/guides"),
        TemplatedRoute(
            "/webhook/docs/guides/{repositoryName}",
            (
                "/webhook/docs/guides/rest-service",
                "/webhook/docs/guides/scheduling-tasks",
                "/webhook/docs/guides/consuming-rest",
                "/webhook/docs/guides/relational-data-access",
            ),
        ),
        TemplatedRoute(
            "/guides/gs/{repositoryName}",
            (
                "/guides/gs/rest-service",
                "/guides/gs/scheduling-tasks",
                "/guides/gs/consuming-rest",
                "/guides/gs/relational-data-access",
            ),
        ),
        LiteralRoute("/guides"),
        LiteralRoute("/error"),
        LiteralRoute("/tools"),
        LiteralRoute("/tools/eclipse"),
        LiteralRoute("/tools/sts"),
        LiteralRoute("/tools/sts/all"),
        TemplatedRoute(
            "/team/{username}",
            ("/team/bclozel", "/team/snicoll", "/team/sdeleuze", "/team/rstoyanchev"),
        ),
        LiteralRoute("/team"),
        LiteralRoute("/search"),
        LiteralRoute("/project"),
        LiteralRoute("/questions"),
        TemplatedRoute(
            "/project_metadata/{projectId}",
            (
                "/project_metadata/spring-boot",
                "/project_metadata/spring-framework",
                "/project_metadata/reactor",
                "/project_metadata/spring-data",
                "/project_metadata/spring-restdocs",
                "/project_metadata/spring-batch",
            ),
        ),
        TemplatedRoute(
            "/badges/{projectId}.svg",
            (
                "/badges/spring-boot.svg",
                "/badges/spring-framework.svg",
                "/badges/reactor.svg",
                "/badges/spring-data.svg",
                "/badges/spring-restdocs.svg",
                "/badges/spring-batch.svg",
            ),
        ),
    ]
    validate_catalog(routes)
    return routes


def validate_catalog(routes: Sequence[Route], matcher: PathMatcher | None = None) -> None:
    """Check the catalog invariants.

    - the catalog is not empty
    - literal patterns are pairwise distinct
    - every templated route has candidates
    - with ``matcher``: every candidate matches its own pattern

    Raises ``ConfigurationError`` on the first violation.
    """
    if not routes:
        msg = "Route catalog is empty."
        raise ConfigurationError(msg)

    seen: set[str] = set()
    for route in routes:
        match route:
            case LiteralRoute(pattern=pattern):
                if pattern in seen:
                    msg = f"Duplicate literal route {pattern!r}."
                    raise ConfigurationError(msg)
                seen.add(pattern)
            case TemplatedRoute(pattern=pattern, candidates=candidates):
                if not candidates:
                    msg = f"Templated route {pattern!r} has no candidate paths."
                    raise ConfigurationError(msg)
                if matcher is None:
                    continue
                for candidate in candidates:
                    if not matcher.match(pattern, candidate):
                        msg = f"Candidate {candidate!r} does not match {pattern!r}."
                        raise ConfigurationError(msg)
            case _:
                msg = f"Not a route: {route!r}"
                raise ConfigurationError(msg)
