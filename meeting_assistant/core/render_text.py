"""Result Rendering — pure functions that turn a validated request into response text.

Invariants:
    - All functions are pure and deterministic (same input → same text)
    - Summary text quotes only the first EXCERPT_LENGTH code points of trimmed content
    - Tasks text never depends on content

Design Decisions:
    - Excerpt counted in code points (str slicing), never bytes, so CJK and emoji
      transcripts are not split mid-character
    - Templates kept as module constants: one place to edit the canned wording
"""

from meeting_assistant.core.domain_types import EXCERPT_LENGTH, GenerateType
from meeting_assistant.core.normalize_text import trim_transcript


SUMMARY_HEADER = "【会议纪要】"
TASKS_HEADER = "✅ 待办事项清单"

SUMMARY_TEMPLATE = (
    SUMMARY_HEADER + "\n\n"
    "主题：{excerpt}...\n\n"
    "本次会议围绕项目进度展开讨论，明确了下一阶段目标与分工安排。\n\n"
    "关键结论：\n"
    "1. 项目周期为6周，9月底交付\n"
    "2. 前端由张三负责，后端由李四牵头\n"
    "3. 每周五下午3点举行进度同步会"
)

TASKS_CHECKLIST = (
    TASKS_HEADER + "\n\n"
    "1. 完成需求文档终稿撰写\n"
    "2. 开发用户登录与权限模块\n"
    "3. 联调前后端 API 接口\n"
    "4. 编写核心功能测试用例\n"
    "5. 准备下周客户演示材料"
)


def build_excerpt(content: str, limit: int = EXCERPT_LENGTH) -> str:
    """First `limit` characters of the trimmed content."""
    return trim_transcript(content)[:limit]


def render_summary(content: str) -> str:
    return SUMMARY_TEMPLATE.format(excerpt=build_excerpt(content))


def render_tasks(content: str) -> str:
    return TASKS_CHECKLIST


_RENDERERS = {
    GenerateType.SUMMARY: render_summary,
    GenerateType.TASKS: render_tasks,
}


def render_result(generate_type: GenerateType, content: str) -> str:
    """Dispatch to the renderer for the requested type."""
    return _RENDERERS[GenerateType(generate_type)](content)
