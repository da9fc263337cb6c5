"""Memento - real-world example: undo and redo in a text editor.

The editor saves its full state (content, cursor, selection, formatting) in
snapshots. ``EditorHistory`` keeps a bounded list of snapshots with a cursor
for undo and redo; ``AdvancedEditorHistory`` adds named snapshots.
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Dict, List

Formatting = Dict[str, Any]


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


class EditorMemento(ABC):
    @abstractmethod
    def get_timestamp(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        pass


class EditorSnapshot(EditorMemento):
    def __init__(self, content: str, cursor_position: int, selected_text: str,
                 formatting: Formatting, clock: Callable[[], datetime] = datetime.now):
        self._content = content
        self._cursor_position = cursor_position
        self._selected_text = selected_text
        self._formatting = dict(formatting)
        self._timestamp = clock().strftime("%Y-%m-%d %H:%M:%S")

    def get_timestamp(self) -> str:
        return self._timestamp

    def get_description(self) -> str:
        preview = self._content[:20] + "..." if len(self._content) > 20 else self._content
        return f'{self._timestamp} - "{preview}" (pos: {self._cursor_position})'

    def get_state(self) -> Dict[str, Any]:
        return {
            "content": self._content,
            "cursor_position": self._cursor_position,
            "selected_text": self._selected_text,
            "formatting": dict(self._formatting),
        }


class TextEditor:
    """The originator."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.content = ""
        self.cursor_position = 0
        self.selected_text = ""
        self.formatting: Formatting = {"bold": False, "italic": False, "font_size": 12}
        self._clock = clock

    def type(self, text: str) -> None:
        position = self.cursor_position
        self.content = self.content[:position] + text + self.content[position:]
        self.cursor_position += len(text)
        print(f"Typed: '{text}' | Content: '{self.content}'")

    def delete(self, length: int) -> None:
        if self.cursor_position >= length:
            start = self.cursor_position - length
            deleted = self.content[start:self.cursor_position]
            self.content = self.content[:start] + self.content[self.cursor_position:]
            self.cursor_position -= length
            print(f"Deleted: '{deleted}' | Content: '{self.content}'")

    def select_text(self, start: int, length: int) -> None:
        self.selected_text = self.content[start:start + length]
        print(f"Selected: '{self.selected_text}'")

    def apply_formatting(self, formatting: Formatting) -> None:
        self.formatting.update(formatting)
        print(f"Applied formatting: {_compact_json(formatting)}")

    def set_cursor_position(self, position: int) -> None:
        self.cursor_position = min(position, len(self.content))
        print(f"Cursor moved to position: {self.cursor_position}")

    def create_memento(self) -> EditorMemento:
        return EditorSnapshot(self.content, self.cursor_position, self.selected_text,
                              self.formatting, self._clock)

    def restore_from_memento(self, memento: EditorMemento) -> None:
        state = memento.get_state()
        self.content = state["content"]
        self.cursor_position = state["cursor_position"]
        self.selected_text = state["selected_text"]
        self.formatting = state["formatting"]
        print(f"State restored | Content: '{self.content}' | Cursor: {self.cursor_position}")

    def get_current_state(self) -> str:
        return (f"Content: '{self.content}' | Cursor: {self.cursor_position} | "
                f"Selected: '{self.selected_text}' | Format: {_compact_json(self.formatting)}")


class EditorHistory:
    """
    The caretaker: a linear undo/redo history.

    Saving after an undo discards the redo branch. The oldest snapshot is
    dropped once the history exceeds ``max_history_size``.
    """

    def __init__(self, editor: TextEditor, max_history_size: int = 50):
        self.editor = editor
        self.max_history_size = max_history_size
        self.history: List[EditorMemento] = []
        self.current_index = -1

    def save_state(self) -> None:
        if self.current_index < len(self.history) - 1:
            self.history = self.history[:self.current_index + 1]

        self.history.append(self.editor.create_memento())
        self.current_index += 1

        if len(self.history) > self.max_history_size:
            self.history.pop(0)
            self.current_index -= 1

        print(f"State saved to history (index: {self.current_index})")

    def undo(self) -> bool:
        if self.current_index > 0:
            self.current_index -= 1
            self.editor.restore_from_memento(self.history[self.current_index])
            print("Undo successful")
            return True

        print("Nothing to undo")
        return False

    def redo(self) -> bool:
        if self.current_index < len(self.history) - 1:
            self.current_index += 1
            self.editor.restore_from_memento(self.history[self.current_index])
            print("Redo successful")
            return True

        print("Nothing to redo")
        return False

    def show_history(self) -> None:
        print("\n=== Editor History ===")
        if not self.history:
            print("No history available")
            return

        for index, memento in enumerate(self.history):
            marker = " -> " if index == self.current_index else "    "
            print(f"{marker}[{index}] {memento.get_description()}")
        print("======================\n")

    def clear_history(self) -> None:
        self.history = []
        self.current_index = -1
        print("History cleared")


class AdvancedEditorHistory(EditorHistory):
    def __init__(self, editor: TextEditor, max_history_size: int = 50):
        super().__init__(editor, max_history_size)
        self.named_snapshots: Dict[str, EditorMemento] = {}

    def save_named_snapshot(self, name: str) -> None:
        self.named_snapshots[name] = self.editor.create_memento()
        print(f"Named snapshot '{name}' saved")

    def restore_named_snapshot(self, name: str) -> bool:
        if name in self.named_snapshots:
            self.editor.restore_from_memento(self.named_snapshots[name])
            print(f"Restored from named snapshot '{name}'")
            return True

        print(f"Named snapshot '{name}' not found")
        return False

    def list_named_snapshots(self) -> None:
        print("\n=== Named Snapshots ===")
        if not self.named_snapshots:
            print("No named snapshots")
        else:
            for name, memento in self.named_snapshots.items():
                print(f"'{name}' - {memento.get_description()}")
        print("========================\n")


def main(clock: Callable[[], datetime] = datetime.now) -> None:
    print("=== Text Editor with Memento Pattern Demo ===\n")

    editor = TextEditor(clock)
    history = AdvancedEditorHistory(editor)

    print("1. Initial state:")
    print(editor.get_current_state() + "\n")
    history.save_state()

    print("\n\n2. Typing 'Hello World':")
    editor.type("Hello World")
    history.save_state()

    print("\n\n3. Applying bold formatting:")
    editor.apply_formatting({"bold": True})
    history.save_state()
    history.save_named_snapshot("hello_world_bold")

    print("\n\n4. Adding more text:")
    editor.type(" - This is amazing!")
    history.save_state()

    print("\n\n5. Deleting some text:")
    editor.delete(10)
    history.save_state()

    history.show_history()

    print("\n\n6. Undo operations:")
    history.undo()
    history.undo()

    print("\n\n7. Redo operation:")
    history.redo()

    history.show_history()

    print("\n\n8. Named snapshots:")
    history.list_named_snapshots()

    print("\n\n9. Restoring from named snapshot:")
    history.restore_named_snapshot("hello_world_bold")

    print("\n\n10. Final state:")
    print(editor.get_current_state())


if __name__ == "__main__":
    main()
