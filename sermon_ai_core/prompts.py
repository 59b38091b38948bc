# sermon_ai_core/prompts.py

"""
Prompts para la generación de contenido derivado de un sermón.

Cada tipo de contenido tiene un template fijo (se interpola con la
transcripción) y sus parámetros de generación.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .domain_models import ContentType

SERMON_CRITIQUE_PROMPT = """\
You are an expert in homiletics and sermon critique. Please provide a constructive critique of the following sermon transcript. Focus on:
1. Clarity of the main message
2. Biblical accuracy and depth
3. Effective use of illustrations
4. Delivery and engagement
5. Practical application

Format your response with clear sections and bullet points where appropriate.

SERMON TRANSCRIPT:
{transcript}
"""

PERSPECTIVE_FEEDBACK_PROMPT = """\
You are a diverse panel of thoughtful listeners from different backgrounds, ages, and life experiences. Review the following sermon transcript and provide perspective feedback on:
1. How the message might be received by different demographics
2. Potential cultural blind spots or assumptions
3. Accessibility of the content for newcomers vs. long-time church members
4. Areas where different perspectives might enrich the message

SERMON TRANSCRIPT:
{transcript}
"""

BIBLE_STUDY_GUIDE_PROMPT = """\
Based on the following sermon transcript, create a comprehensive Bible Study Leader's Guide with:
1. Key Scripture passages from the sermon
2. 5-7 discussion questions that progress from observation to application
3. Context and background information for the leader
4. Potential challenges and how to address them
5. Prayer points related to the sermon topic

Format this as a ready-to-use leader's guide with clear sections.

SERMON TRANSCRIPT:
{transcript}
"""

KIDS_FOLLOW_ALONG_PROMPT = """\
Create a one-page "Follow Along" activity sheet for elementary-age children (6-11) based on this sermon transcript. Include:
1. A simple, child-friendly explanation of the main sermon point
2. 3-4 fill-in-the-blank statements to help kids listen for key points
3. A word search with 5-8 key terms from the sermon
4. A simple drawing activity related to the sermon theme
5. One "take home" application question for family discussion

Format your response as if creating a printable activity sheet.

SERMON TRANSCRIPT:
{transcript}
"""


@dataclass(frozen=True)
class ContentSpec:
    template: str
    temperature: float
    max_tokens: int


CONTENT_SPECS: Dict[ContentType, ContentSpec] = {
    ContentType.CRITIQUE: ContentSpec(SERMON_CRITIQUE_PROMPT, 0.7, 1500),
    ContentType.PERSPECTIVE_FEEDBACK: ContentSpec(PERSPECTIVE_FEEDBACK_PROMPT, 0.7, 1500),
    ContentType.BIBLE_STUDY_GUIDE: ContentSpec(BIBLE_STUDY_GUIDE_PROMPT, 0.7, 1500),
    ContentType.KIDS_FOLLOW_ALONG: ContentSpec(KIDS_FOLLOW_ALONG_PROMPT, 0.8, 1200),
}


def get_content_spec(content_type: ContentType | str) -> ContentSpec:
    return CONTENT_SPECS[ContentType(content_type)]


def build_prompt(content_type: ContentType | str, transcript: str) -> str:
    return get_content_spec(content_type).template.format(transcript=transcript)
