from .linked import Node, LinkedList, VISIT_SEPARATOR
