# node_module.py

import weakref

from steer import step_arc


class Edge:
    """
    Motion primitive connecting a parent pose to a child node.

    The edge owns its child. It keeps the start pose rather than the
    parent node so that it never extends the parent's lifetime.
    """

    def __init__(self, parent, primitive, child_primitive=None):
        self.start = parent.pose
        self.primitive = primitive
        self.end = step_arc(self.start, primitive.curvature, primitive.distance)
        self.child = Node(self.end, parent=parent, incoming=self,
                          primitive=child_primitive)

    @property
    def curvature(self):
        return self.primitive.curvature

    @property
    def distance(self):
        return self.primitive.distance

    def replay(self, ds=1.0):
        """Re-integrate the arc in ds steps; the last pose is the stored end."""
        poses = [self.start]
        travelled = 0.0
        p = self.start
        while travelled + ds < self.primitive.distance:
            travelled += ds
            p = step_arc(p, self.primitive.curvature, ds)
            poses.append(p)
        poses.append(self.end)
        return poses


class Node:
    def __init__(self, pose, parent=None, incoming=None, primitive=None):
        """
        Initialize a tree node.

        Parameters
        ----------
        pose : Pose
            Pose of the node.
        parent : Node, optional
            Parent node, held weakly.
        incoming : Edge, optional
            Edge that created this node, held weakly.
        primitive : MotionPrimitive, optional
            Primitive used by the next expansion. Drawn lazily when None.
        """
        self.pose = pose
        self._parent = weakref.ref(parent) if parent is not None else None
        self._incoming = weakref.ref(incoming) if incoming is not None else None
        self.edges = []
        self.primitive = primitive

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    @property
    def incoming(self):
        if self._incoming is None:
            return None
        return self._incoming()

    @property
    def children(self):
        return [e.child for e in self.edges]

    def detach(self):
        """Drop the links to the parent; the node becomes a root."""
        self._parent = None
        self._incoming = None

    def expand(self, sampler):
        """
        Grow one child from this node.

        Uses the pending primitive and draws a fresh one for the next call,
        so repeated expansion of the same node gives different children.
        """
        primitive = self.primitive if self.primitive is not None else sampler.sample()
        self.primitive = sampler.sample()
        edge = Edge(self, primitive, sampler.sample())
        self.edges.append(edge)
        return edge

    def iter_subtree(self):
        """Nodes of the subtree below this one, this node included."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(e.child for e in node.edges)

    def iter_edges(self):
        """Edges of the subtree below this one."""
        for node in self.iter_subtree():
            yield from node.edges

    def ancestor(self, up):
        """Node `up` parent links above this one, or None if the chain is shorter."""
        node = self
        for _ in range(up):
            node = node.parent
            if node is None:
                return None
        return node

    def descends_from(self, other, up):
        """True if other is this node or one of its first `up` ancestors."""
        node = self
        for _ in range(up):
            if node is other:
                return True
            node = node.parent
            if node is None:
                return False
        return node is other

    def __repr__(self):
        return f"Node({self.pose.x:.2f}, {self.pose.y:.2f}, {self.pose.heading:.3f})"
