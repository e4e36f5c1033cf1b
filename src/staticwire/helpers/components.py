from staticwire.core.nodes import Node


def is_component(node: Node) -> bool:
    """Return True when the node refers to a component rather than a DOM tag.

    Component names carry upper-case letters (MyButton); plain elements don't.
    """
    return node.name.lower() != node.name
