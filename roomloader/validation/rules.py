"""
Diagnostic rule definitions.

Each rule has:
- Code: Unique identifier (e.g., "BEVEL-001")
- Severity: FAIL, WARN, or INFO
- Rule reference: The authoring convention the rule protects
- Message template: Human-readable description
- Remediation: Suggested fix

Rules are organized by category:
- LOAD: Mesh source and classification
- PARSE: Spawn directive names
- BEVEL: Edge beveling
- GEOM: Optional geometry checks
"""

from dataclasses import dataclass
from typing import Optional

from .core import LoadStage, Severity, ValidationIssue


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a diagnostic rule."""
    code: str
    severity: Severity
    rule_reference: str
    message_template: str
    remediation_template: Optional[str] = None
    description: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        """Format the message template with provided values."""
        return self.message_template.format(**kwargs)

    def format_remediation(self, **kwargs) -> Optional[str]:
        """Format the remediation template with provided values."""
        if self.remediation_template:
            return self.remediation_template.format(**kwargs)
        return None

    def issue(self, mesh: Optional[str], stage: LoadStage, **kwargs) -> ValidationIssue:
        """Build an issue for this rule, filling both templates from kwargs."""
        return ValidationIssue(
            severity=self.severity,
            code=self.code,
            message=self.format_message(**kwargs),
            rule_reference=self.rule_reference,
            remediation=self.format_remediation(**kwargs),
            mesh=mesh,
            stage=stage,
        )


# =============================================================================
# LOAD RULES
# =============================================================================

LOAD_001 = ValidationRule(
    code="LOAD-001",
    severity=Severity.WARN,
    rule_reference="Mesh source - every object needs geometry",
    message_template="Object '{name}' has no vertices",
    remediation_template="Delete the empty object or give it geometry",
    description="Empty meshes are skipped before classification"
)

LOAD_002 = ValidationRule(
    code="LOAD-002",
    severity=Severity.WARN,
    rule_reference="Naming convention - f.start marks the spawn point",
    message_template="Start marker '{name}' has no faces, using its first vertex",
    remediation_template="Give the start marker at least one face",
)

# =============================================================================
# PARSE RULES
# =============================================================================

PARSE_001 = ValidationRule(
    code="PARSE-001",
    severity=Severity.WARN,
    rule_reference="Naming convention - f.<type>(<arg>, ...)",
    message_template="Spawn directive skipped: {error}",
    remediation_template="Fix the object name: quote arguments, separate them with ',' and close with ')'",
    description="Only raised when the directive policy is SKIP; RAISE aborts the load"
)

# =============================================================================
# BEVEL RULES
# =============================================================================

BEVEL_001 = ValidationRule(
    code="BEVEL-001",
    severity=Severity.WARN,
    rule_reference="Collision meshes must be closed 2-manifolds",
    message_template="{count} faces are incident to the same edge",
    remediation_template="Close open boundaries and split non-manifold edges",
    description="The edge keeps its face planes but receives no bevel plane"
)

BEVEL_002 = ValidationRule(
    code="BEVEL-002",
    severity=Severity.WARN,
    rule_reference="Collision meshes must enclose a volume",
    message_template="Incident face normals cancel out on edge {edge}",
    remediation_template="Remove zero-thickness geometry from the collision mesh",
    description="A bevel normal cannot be derived from antiparallel face normals"
)

# =============================================================================
# GEOMETRY RULES (optional checks)
# =============================================================================

GEOM_001 = ValidationRule(
    code="GEOM-001",
    severity=Severity.WARN,
    rule_reference="Collision faces must be proper triangles",
    message_template="Face {index} is degenerate (zero area)",
    remediation_template="Merge by distance or dissolve degenerate faces before export",
)

GEOM_002 = ValidationRule(
    code="GEOM-002",
    severity=Severity.WARN,
    rule_reference="Collision faces must wind outward",
    message_template="Mesh encloses a negative volume ({volume:.4f}), normals point inward",
    remediation_template="Recalculate normals outside before export",
)
