# tree-sitter-java node types
JAVA_PACKAGE = "package_declaration"
JAVA_CLASS = "class_declaration"
JAVA_INTERFACE = "interface_declaration"
JAVA_RECORD = "record_declaration"
JAVA_ENUM = "enum_declaration"
JAVA_ANNOTATION = "annotation_type_declaration"
JAVA_METHOD = "method_declaration"
JAVA_CONSTRUCTOR = "constructor_declaration"
JAVA_COMPACT_CONSTRUCTOR = "compact_constructor_declaration"
JAVA_CLASS_BODY = "class_body"
JAVA_INTERFACE_BODY = "interface_body"
JAVA_BLOCK = "block"
JAVA_CONSTRUCTOR_BODY = "constructor_body"
JAVA_IDENTIFIER = "identifier"
JAVA_SCOPED_IDENTIFIER = "scoped_identifier"

# Declarations that get a skeleton chunk and are descended into.
JAVA_DECOMPOSABLE_TYPES = frozenset({JAVA_CLASS, JAVA_INTERFACE, JAVA_RECORD})

# Declarations emitted verbatim as a single chunk.
JAVA_FALLBACK_TYPES = frozenset({JAVA_ENUM, JAVA_ANNOTATION})

# Every declaration that introduces a (possibly nested) type name.
JAVA_TYPE_DECLARATIONS = JAVA_DECOMPOSABLE_TYPES | JAVA_FALLBACK_TYPES

JAVA_TYPE_BODIES = frozenset({JAVA_CLASS_BODY, JAVA_INTERFACE_BODY})

JAVA_METHODS = frozenset({JAVA_METHOD, JAVA_CONSTRUCTOR, JAVA_COMPACT_CONSTRUCTOR})

JAVA_METHOD_BODIES = frozenset({JAVA_BLOCK, JAVA_CONSTRUCTOR_BODY})

# Placeholder written in place of a collapsed method body.
COLLAPSED_BODY_TEMPLATE = "{{ id:{identifier} }}"
