"""
trivia_engine.types — TypedDict schemas for presentation content
=================================================================

This module documents the exact structure of the content dictionaries
handed to a PresentationSink. Sinks translate them into whatever the
chat platform understands (embeds, buttons, plain text).

All types are exported from the main package:

    from trivia_engine import MessageContent, OptionView
"""

from typing import List, Literal, Optional, TypedDict


OptionStyle = Literal["secondary", "success"]
MessageColor = Literal["neutral", "green", "red", "blue"]


class OptionView(TypedDict):
    """One answer button.

    Fields
    ------
    label : str
        "A", "B", "C" or "D".
    text : str
        Answer text shown next to the label.
    style : OptionStyle
        "success" marks the correct option once the round is closed.
    disabled : bool
        True once the round no longer accepts submissions.
    """
    label: str
    text: str
    style: OptionStyle
    disabled: bool


class MessageContent(TypedDict):
    """A message published, edited or sent as a follow-up.

    Fields
    ------
    title : str
        Heading, e.g. "Question 1:\\nWhat is the capital of France?".
    description : str
        Body text.
    options : List[OptionView]
        Empty for plain result and notice messages.
    footer : Optional[str]
        Category, time left or participant count.
    color : MessageColor
        Green for correct results, red for wrong or missing answers.
    """
    title: str
    description: str
    options: List[OptionView]
    footer: Optional[str]
    color: MessageColor
