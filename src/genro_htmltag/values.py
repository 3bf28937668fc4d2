# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Static HTML data: attribute names and enumerated attribute values.

Setters accept either an Enum member or its raw string; validators
normalize members to their value before comparing.

ENUMERATED_ATTRIBUTES maps attributes whose closed value set is the same
for every element to its Enum. BOOLEAN_TOKENS and BARE_ENUMERATED_ATTRIBUTES
say how they accept booleans. CONSTRAINED_ATTRIBUTES maps attributes with
range or pattern rules to their constraint. Element-specific rules (button
``type``, form ``method``...) live on the trait setters instead.
"""

from __future__ import annotations

from enum import Enum

from .validations import Range, Regex

# --- Attribute names ---


class GlobalAttribute(Enum):
    """Global attribute names, usable wherever a name is expected."""

    ACCESSKEY = "accesskey"
    AUTOCAPITALIZE = "autocapitalize"
    AUTOFOCUS = "autofocus"
    CLASS = "class"
    CONTENTEDITABLE = "contenteditable"
    DIR = "dir"
    DRAGGABLE = "draggable"
    ENTERKEYHINT = "enterkeyhint"
    HIDDEN = "hidden"
    ID = "id"
    INERT = "inert"
    INPUTMODE = "inputmode"
    LANG = "lang"
    NONCE = "nonce"
    POPOVER = "popover"
    ROLE = "role"
    SPELLCHECK = "spellcheck"
    STYLE = "style"
    TABINDEX = "tabindex"
    TITLE = "title"
    TRANSLATE = "translate"


class Aria(Enum):
    """Common ARIA attribute keys (without the ``aria-`` prefix)."""

    ACTIVEDESCENDANT = "activedescendant"
    CONTROLS = "controls"
    CURRENT = "current"
    DESCRIBEDBY = "describedby"
    DISABLED = "disabled"
    EXPANDED = "expanded"
    HASPOPUP = "haspopup"
    HIDDEN = "hidden"
    INVALID = "invalid"
    LABEL = "label"
    LABELLEDBY = "labelledby"
    LIVE = "live"
    PRESSED = "pressed"
    REQUIRED = "required"
    SELECTED = "selected"


# --- Enumerated values shared by every element ---


class Target(Enum):
    """Browsing context for navigation and form submission."""

    BLANK = "_blank"
    PARENT = "_parent"
    SELF = "_self"
    TOP = "_top"


class CrossOrigin(Enum):
    ANONYMOUS = "anonymous"
    USE_CREDENTIALS = "use-credentials"


class ReferrerPolicy(Enum):
    NO_REFERRER = "no-referrer"
    NO_REFERRER_WHEN_DOWNGRADE = "no-referrer-when-downgrade"
    ORIGIN = "origin"
    ORIGIN_WHEN_CROSS_ORIGIN = "origin-when-cross-origin"
    SAME_ORIGIN = "same-origin"
    STRICT_ORIGIN = "strict-origin"
    STRICT_ORIGIN_WHEN_CROSS_ORIGIN = "strict-origin-when-cross-origin"
    UNSAFE_URL = "unsafe-url"


class Direction(Enum):
    AUTO = "auto"
    LTR = "ltr"
    RTL = "rtl"


class Translate(Enum):
    NO = "no"
    YES = "yes"


class ContentEditable(Enum):
    FALSE = "false"
    PLAINTEXT_ONLY = "plaintext-only"
    TRUE = "true"


class Draggable(Enum):
    FALSE = "false"
    TRUE = "true"


class Spellcheck(Enum):
    FALSE = "false"
    TRUE = "true"


class Autocapitalize(Enum):
    CHARACTERS = "characters"
    NONE = "none"
    OFF = "off"
    ON = "on"
    SENTENCES = "sentences"
    WORDS = "words"


class EnterKeyHint(Enum):
    DONE = "done"
    ENTER = "enter"
    GO = "go"
    NEXT = "next"
    PREVIOUS = "previous"
    SEARCH = "search"
    SEND = "send"


class InputMode(Enum):
    DECIMAL = "decimal"
    EMAIL = "email"
    NONE = "none"
    NUMERIC = "numeric"
    SEARCH = "search"
    TEL = "tel"
    TEXT = "text"
    URL = "url"


class Popover(Enum):
    AUTO = "auto"
    HINT = "hint"
    MANUAL = "manual"


class PopoverTargetAction(Enum):
    HIDE = "hide"
    SHOW = "show"
    TOGGLE = "toggle"


class Loading(Enum):
    EAGER = "eager"
    LAZY = "lazy"


class Decoding(Enum):
    ASYNC = "async"
    AUTO = "auto"
    SYNC = "sync"


class FetchPriority(Enum):
    AUTO = "auto"
    HIGH = "high"
    LOW = "low"


class Role(Enum):
    """WAI-ARIA roles."""

    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    APPLICATION = "application"
    ARTICLE = "article"
    BANNER = "banner"
    BUTTON = "button"
    CELL = "cell"
    CHECKBOX = "checkbox"
    COLUMNHEADER = "columnheader"
    COMBOBOX = "combobox"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    DEFINITION = "definition"
    DIALOG = "dialog"
    DOCUMENT = "document"
    FEED = "feed"
    FIGURE = "figure"
    FORM = "form"
    GRID = "grid"
    GRIDCELL = "gridcell"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    LINK = "link"
    LIST = "list"
    LISTBOX = "listbox"
    LISTITEM = "listitem"
    LOG = "log"
    MAIN = "main"
    MARQUEE = "marquee"
    MATH = "math"
    MENU = "menu"
    MENUBAR = "menubar"
    MENUITEM = "menuitem"
    MENUITEMCHECKBOX = "menuitemcheckbox"
    MENUITEMRADIO = "menuitemradio"
    NAVIGATION = "navigation"
    NONE = "none"
    NOTE = "note"
    OPTION = "option"
    PRESENTATION = "presentation"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    RADIOGROUP = "radiogroup"
    REGION = "region"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SCROLLBAR = "scrollbar"
    SEARCH = "search"
    SEARCHBOX = "searchbox"
    SEPARATOR = "separator"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    SWITCH = "switch"
    TAB = "tab"
    TABLE = "table"
    TABLIST = "tablist"
    TABPANEL = "tabpanel"
    TERM = "term"
    TEXTBOX = "textbox"
    TIMER = "timer"
    TOOLBAR = "toolbar"
    TOOLTIP = "tooltip"
    TREE = "tree"
    TREEGRID = "treegrid"
    TREEITEM = "treeitem"


class Method(Enum):
    DIALOG = "dialog"
    GET = "get"
    POST = "post"


class Enctype(Enum):
    MULTIPART_FORM_DATA = "multipart/form-data"
    TEXT_PLAIN = "text/plain"
    URLENCODED = "application/x-www-form-urlencoded"


# --- Element-specific values ---


class ButtonType(Enum):
    """Values of the ``type`` attribute of ``<button>``."""

    BUTTON = "button"
    RESET = "reset"
    SUBMIT = "submit"


class ButtonCommand(Enum):
    CLOSE = "close"
    HIDE_POPOVER = "hide-popover"
    REQUEST_CLOSE = "request-close"
    SHOW_MODAL = "show-modal"
    SHOW_POPOVER = "show-popover"
    TOGGLE_POPOVER = "toggle-popover"


class InputType(Enum):
    """Values of the ``type`` attribute of ``<input>``."""

    BUTTON = "button"
    CHECKBOX = "checkbox"
    COLOR = "color"
    DATE = "date"
    DATETIME_LOCAL = "datetime-local"
    EMAIL = "email"
    FILE = "file"
    HIDDEN = "hidden"
    IMAGE = "image"
    MONTH = "month"
    NUMBER = "number"
    PASSWORD = "password"
    RADIO = "radio"
    RANGE = "range"
    RESET = "reset"
    SEARCH = "search"
    SUBMIT = "submit"
    TEL = "tel"
    TEXT = "text"
    TIME = "time"
    URL = "url"
    WEEK = "week"


class Autocomplete(Enum):
    OFF = "off"
    ON = "on"


class Wrap(Enum):
    """Values of the ``wrap`` attribute of ``<textarea>``."""

    HARD = "hard"
    OFF = "off"
    SOFT = "soft"


class ListType(Enum):
    """Numbering type of ``<ol>``."""

    DECIMAL = "1"
    LOWER_ALPHA = "a"
    LOWER_ROMAN = "i"
    UPPER_ALPHA = "A"
    UPPER_ROMAN = "I"


class ShadowRootMode(Enum):
    CLOSED = "closed"
    OPEN = "open"


# --- Lookup tables ---

ENUMERATED_ATTRIBUTES: dict[str, type[Enum]] = {
    "autocapitalize": Autocapitalize,
    "contenteditable": ContentEditable,
    "crossorigin": CrossOrigin,
    "decoding": Decoding,
    "dir": Direction,
    "draggable": Draggable,
    "enterkeyhint": EnterKeyHint,
    "fetchpriority": FetchPriority,
    "formenctype": Enctype,
    "formmethod": Method,
    "formtarget": Target,
    "inputmode": InputMode,
    "loading": Loading,
    "popover": Popover,
    "popovertargetaction": PopoverTargetAction,
    "referrerpolicy": ReferrerPolicy,
    "role": Role,
    "shadowrootmode": ShadowRootMode,
    "spellcheck": Spellcheck,
    "target": Target,
    "translate": Translate,
}

# True/False accepted as the given (true, false) tokens.
BOOLEAN_TOKENS: dict[str, tuple[str, str]] = {
    "contenteditable": ("true", "false"),
    "draggable": ("true", "false"),
    "spellcheck": ("true", "false"),
    "translate": ("yes", "no"),
}

# Enumerated attributes that may also render bare (True) or be omitted (False).
BARE_ENUMERATED_ATTRIBUTES: frozenset[str] = frozenset({"popover"})

CONSTRAINED_ATTRIBUTES: dict[str, Range | Regex] = {
    "tabindex": Range(ge=-1),
    "lang": Regex(
        r"[A-Za-z]{2,3}(-[A-Za-z0-9]{1,8})*",
        label="value is a BCP 47 language tag",
    ),
}
