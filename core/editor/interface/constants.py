"""Interface-level constants for the tuido TUI."""

from typing import Dict, List

LANG_PACK: Dict[str, Dict[str, str]] = {
    "en": {
        # modes
        "MODE_NORMAL": "-- NORMAL --",
        "MODE_INSERT": "-- INSERT --",
        "MODE_COMMAND": "-- COMMAND --",
        "MODE_VISUAL": "-- VISUAL --",
        "MODE_SEARCH": "-- SEARCH --",
        "MODE_NOTE_EDIT": "-- NOTE EDIT --",
        "MODE_HELP": "-- HELP --",
        # prompts and chrome
        "PROMPT_NEW": "New TODO: ",
        "PROMPT_EDIT": "Edit TODO: ",
        "PROMPT_NOTE": "Note: ",
        "LIST_TITLE": " TODOs ",
        "LIST_EMPTY": "No todos. Press i to add one, ? for help.",
        "HELP_TITLE": " Help ",
        "STATUS_POSITION": "[{pos}/{total}] {percent}%",
        "STATUS_COMPLETED": "{count} completed",
        "STATUS_PRIORITIES": "A:{a} B:{b} C:{c}",
        "STATUS_RESULTS": "{count} results for '{query}'",
        # messages
        "LOADED_DEFAULT": "Loaded todos from file",
        "TODO_ADDED": "TODO added",
        "EMPTY_NOT_ADDED": "Empty todo not added",
        "TODO_UPDATED": "TODO updated",
        "TODO_DELETED_EMPTY": "TODO deleted (empty text)",
        "TODO_TOGGLED": "TODO toggled",
        "TODOS_TOGGLED": "{count} todos toggled",
        "TODO_DELETED": "TODO deleted",
        "TODOS_DELETED": "{count} todos deleted",
        "TODO_YANKED": "TODO yanked",
        "TODOS_YANKED": "{count} todos yanked",
        "NOTHING_TO_PASTE": "Nothing to paste",
        "PASTED": "Pasted {count} todos",
        "NOTE_SAVED": "Note saved",
        "NO_TODO_SELECTED": "No todo selected",
        "UNDO_DONE": "Undo: reverted to previous state",
        "NOTHING_TO_UNDO": "Nothing to undo",
        "REDO_DONE": "Redo: reapplied change",
        "NOTHING_TO_REDO": "Nothing to redo",
        "NOTHING_TO_REPEAT": "Nothing to repeat",
        "UNSAVED_CHANGES": "Error: unsaved changes. Use :q! to quit without saving",
        "SAVED": "Saved to {path}",
        "SAVE_FAILED": "Error saving: {error} (check permissions)",
        "SAVE_TO_FAILED": "Error saving to {path}: {error}",
        "CLEARED": "Removed {count} completed todos",
        "SORTED_COMPLETION": "Sorted by completion status",
        "SORTED_PRIORITY": "Sorted by priority",
        "OPENED": "Loaded from {path}",
        "OPEN_INVALID": "Invalid file format in {path}",
        "OPEN_FAILED": "Error reading {path}: {error}",
        "OPEN_USAGE": "Usage: :open <filename> (use quotes for spaces)",
        "EXPORTED": "Exported to {path}",
        "EXPORT_FAILED": "Error: {error}",
        "EXPORT_UNSUPPORTED": "Unsupported format: {path} (use .txt or .md)",
        "EXPORT_USAGE": "Usage: :export <filename> (use quotes for spaces, .txt or .md)",
        "SHELL_OUTPUT": "> {output}",
        "SHELL_FAILED": "Error: {error}",
        "SHELL_USAGE": "Usage: :!<command>",
        "BAD_QUOTING": "Error: {error}",
        "UNKNOWN_COMMAND": "Unknown command: {command}",
    },
    "ru": {
        "MODE_NORMAL": "-- НОРМАЛЬНЫЙ --",
        "MODE_INSERT": "-- ВСТАВКА --",
        "MODE_COMMAND": "-- КОМАНДА --",
        "MODE_VISUAL": "-- ВЫДЕЛЕНИЕ --",
        "MODE_SEARCH": "-- ПОИСК --",
        "MODE_NOTE_EDIT": "-- ЗАМЕТКА --",
        "MODE_HELP": "-- СПРАВКА --",
        "PROMPT_NEW": "Новая задача: ",
        "PROMPT_EDIT": "Правка задачи: ",
        "PROMPT_NOTE": "Заметка: ",
        "LIST_TITLE": " Задачи ",
        "LIST_EMPTY": "Задач нет. Нажмите i, чтобы добавить, или ? для справки.",
        "HELP_TITLE": " Справка ",
        "STATUS_COMPLETED": "выполнено: {count}",
        "STATUS_RESULTS": "найдено {count} по '{query}'",
        "LOADED_DEFAULT": "Задачи загружены из файла",
        "TODO_ADDED": "Задача добавлена",
        "EMPTY_NOT_ADDED": "Пустая задача не добавлена",
        "TODO_UPDATED": "Задача обновлена",
        "TODO_DELETED_EMPTY": "Задача удалена (пустой текст)",
        "TODO_TOGGLED": "Статус задачи переключён",
        "TODOS_TOGGLED": "Переключено задач: {count}",
        "TODO_DELETED": "Задача удалена",
        "TODOS_DELETED": "Удалено задач: {count}",
        "TODO_YANKED": "Задача скопирована",
        "TODOS_YANKED": "Скопировано задач: {count}",
        "NOTHING_TO_PASTE": "Нечего вставлять",
        "PASTED": "Вставлено задач: {count}",
        "NOTE_SAVED": "Заметка сохранена",
        "NO_TODO_SELECTED": "Задача не выбрана",
        "UNDO_DONE": "Отмена: возврат к предыдущему состоянию",
        "NOTHING_TO_UNDO": "Нечего отменять",
        "REDO_DONE": "Повтор: изменение применено снова",
        "NOTHING_TO_REDO": "Нечего повторять",
        "NOTHING_TO_REPEAT": "Нет действия для повтора",
        "UNSAVED_CHANGES": "Ошибка: есть несохранённые изменения. Используйте :q!, чтобы выйти без сохранения",
        "SAVED": "Сохранено в {path}",
        "SAVE_FAILED": "Ошибка сохранения: {error} (проверьте права)",
        "SAVE_TO_FAILED": "Ошибка сохранения в {path}: {error}",
        "CLEARED": "Удалено выполненных задач: {count}",
        "SORTED_COMPLETION": "Отсортировано по статусу",
        "SORTED_PRIORITY": "Отсортировано по приоритету",
        "OPENED": "Загружено из {path}",
        "OPEN_INVALID": "Неверный формат файла {path}",
        "OPEN_FAILED": "Ошибка чтения {path}: {error}",
        "EXPORTED": "Экспортировано в {path}",
        "EXPORT_UNSUPPORTED": "Неподдерживаемый формат: {path} (.txt или .md)",
        "UNKNOWN_COMMAND": "Неизвестная команда: {command}",
    },
}

HELP_LINES: List[str] = [
    "",
    "KEY BINDINGS",
    "",
    "Navigation:",
    "  j / k          Move up/down",
    "  gg             Go to first todo",
    "  G              Go to last todo",
    "  0 / $          Jump to first/last",
    "  3j / 5k        Repeat motion N times",
    "",
    "Editing:",
    "  i              Insert new todo",
    "  A              Append new todo",
    "  e              Edit selected todo",
    "  x              Toggle completion",
    "  dd             Delete todo",
    "  o              Open note editor",
    "",
    "Yank/Paste:",
    "  y              Yank (copy) todo(s)",
    "  p              Paste below current",
    "  .              Repeat last action",
    "",
    "Undo/Redo:",
    "  u              Undo",
    "  Ctrl+r         Redo",
    "",
    "Visual Mode:",
    "  v              Enter visual mode",
    "  j / k          Extend selection",
    "  x              Toggle selected todos",
    "  d              Delete selected todos",
    "  y              Yank selected todos",
    "  Esc            Exit visual mode",
    "",
    "Search:",
    "  /              Start search",
    "  Enter          Confirm search",
    "  Esc            Clear search",
    "",
    "Commands:",
    "  :q             Quit (warns if unsaved)",
    "  :q!            Force quit without saving",
    "  :w             Save",
    "  :wq            Save and quit",
    "  :clear         Remove completed todos",
    "  :sort          Sort by completion",
    "  :sort priority Sort by priority",
    "  :!cmd          Execute shell command",
    "  :write <file>  Save to file (use quotes for spaces)",
    "  :open <file>   Load from file (use quotes for spaces)",
    "  :export <file> Export to .txt or .md (use quotes)",
    "  :help          Show this help",
    "",
    "Other:",
    "  ?              Show help",
    "  Esc            Exit current mode",
    "",
    "Press Esc to close",
]
