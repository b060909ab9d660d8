"""
Core data structures for room load diagnostics.

Defines the fundamental types used throughout the validation package:
- Severity: Issue severity levels (INFO, WARN, FAIL)
- LoadStage: Loader stages where diagnostics are raised
- ValidationIssue: Individual diagnostic finding
- ValidationResult: Collection of issues with pass/fail status
- ValidationError: Exception raised when a result contains failures
- RoomLoadError and its subclasses: fatal load-time errors
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class Severity(Enum):
    """Diagnostic severity levels.

    - INFO: Informational, logged but doesn't affect pass/fail
    - WARN: Degrades the room (missing collider detail, dropped directive)
    - FAIL: The room cannot be trusted
    """
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


class LoadStage(Enum):
    """Loader stages where diagnostics occur."""
    SOURCE = "source"
    CLASSIFY = "classify"
    DIRECTIVE = "directive"
    BRUSH = "brush"
    BEVEL = "bevel"

    def __str__(self) -> str:
        return self.value


@dataclass
class ValidationIssue:
    """Represents a single diagnostic finding.

    Attributes:
        severity: Issue severity (INFO, WARN, FAIL)
        code: Rule code (e.g., "BEVEL-001")
        message: Human-readable description
        rule_reference: Short reference to the convention that was broken
        remediation: Optional suggested fix
        mesh: Name of the mesh the issue was found on
        stage: Loader stage that raised the issue
    """
    severity: Severity
    code: str
    message: str
    rule_reference: str
    remediation: Optional[str] = None
    mesh: Optional[str] = None
    stage: Optional[LoadStage] = None

    def format(self) -> str:
        """Format issue for display.

        Returns:
            [SEVERITY] RULE_ID mesh=M stage=S :: message :: fix=FIX
        """
        mesh = self.mesh if self.mesh is not None else '-'
        stage = self.stage or '-'
        fix = self.remediation or 'N/A'

        return (
            f"[{self.severity}] {self.code} "
            f"mesh={mesh} stage={stage} :: "
            f"{self.message} :: fix={fix}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass
class ValidationResult:
    """Collection of diagnostics with pass/fail determination.

    A room load appends to the result it is given, so one result can
    gather the report for a whole level.
    """
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def failed(self) -> bool:
        return any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARN]

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.FAIL]

    @property
    def infos(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.INFO]

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def codes(self) -> List[str]:
        """Rule codes of all issues, in the order they were raised."""
        return [i.code for i in self.issues]

    def raise_if_failed(self) -> None:
        """Raise ValidationError if any FAIL issue was recorded."""
        if self.failed:
            raise ValidationError(self)

    def report(self) -> str:
        """Generate a formatted report of all issues.

        Returns:
            Multi-line string with all issues formatted
        """
        if not self.issues:
            return "Room loaded cleanly: No issues found"

        lines = []
        status = "PASSED" if self.passed else "FAILED"
        lines.append(f"Room load {status}: {len(self.issues)} issue(s)")
        lines.append("-" * 60)

        # Group by severity
        for severity in [Severity.FAIL, Severity.WARN, Severity.INFO]:
            severity_issues = [i for i in self.issues if i.severity == severity]
            if severity_issues:
                lines.append(f"\n{severity.name} ({len(severity_issues)}):")
                for issue in severity_issues:
                    lines.append(issue.format())

        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'passed': self.passed,
            'issue_count': len(self.issues),
            'fail_count': len(self.errors),
            'warn_count': len(self.warnings),
            'info_count': len(self.infos),
            'issues': [
                {
                    'severity': str(issue.severity),
                    'code': issue.code,
                    'message': issue.message,
                    'rule_reference': issue.rule_reference,
                    'remediation': issue.remediation,
                    'mesh': issue.mesh,
                    'stage': str(issue.stage) if issue.stage else None,
                }
                for issue in self.issues
            ]
        }


class ValidationError(Exception):
    """Exception raised when a result holds FAIL severity issues.

    Attributes:
        result: The ValidationResult that caused the failure
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(result.report())


class RoomLoadError(Exception):
    """Base class for errors that abort a room load."""


class MeshSourceError(RoomLoadError):
    """The mesh source could not supply well-formed meshes."""


class DirectiveParseError(RoomLoadError):
    """A spawn directive name does not follow the call syntax.

    Attributes:
        text: The directive text that was being parsed
        position: Character offset where parsing stopped
        mesh: Name of the mesh carrying the directive, when known
    """

    def __init__(self, message: str, text: str, position: int, mesh: Optional[str] = None):
        self.text = text
        self.position = position
        self.mesh = mesh
        super().__init__(message)

    def with_mesh(self, mesh: str) -> 'DirectiveParseError':
        """Return a copy of this error that names the offending mesh."""
        return type(self)(
            f"mesh '{mesh}': {self.args[0]}", self.text, self.position, mesh=mesh
        )


class UnterminatedString(DirectiveParseError):
    """A quoted argument reached end of input without a closing quote."""


class MalformedCall(DirectiveParseError):
    """An argument list is missing a ',' separator or the closing ')'."""
