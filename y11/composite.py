"""A container of child widgets with depth-first lookup and removal."""

from y11.widget import Widget


class Composite:
    """Holds an ordered list of child widgets."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._children = []

    def add_widget(self, widget):
        """Append ``widget`` and return it."""
        if not isinstance(widget, Widget):
            raise TypeError(f"expected a Widget, got {type(widget).__name__}")
        self._children.append(widget)
        return widget

    def get_widget_by_id(self, widget_id):
        """Find a descendant by id, depth first; None if there is none."""
        for child in self._children:
            if child.id == widget_id:
                return child
            if isinstance(child, Composite):
                found = child.get_widget_by_id(widget_id)
                if found is not None:
                    return found
        return None

    def remove_widget(self, widget):
        """Remove ``widget`` from anywhere below this container; True if found."""
        for index, child in enumerate(self._children):
            if child is widget:
                del self._children[index]
                return True
            if isinstance(child, Composite) and child.remove_widget(widget):
                return True
        return False

    def remove_widget_by_id(self, widget_id):
        """Remove the first descendant with ``widget_id``; True if found."""
        for index, child in enumerate(self._children):
            if child.id == widget_id:
                del self._children[index]
                return True
            if isinstance(child, Composite) and child.remove_widget_by_id(widget_id):
                return True
        return False

    def __iter__(self):
        return iter(list(self._children))

    def __len__(self):
        return len(self._children)