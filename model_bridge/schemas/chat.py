from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel

class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant", "tool", "function"]
    # Vision requests send a list of text/image parts; tool-call-only assistant messages send none
    content: Optional[Union[str, List[Dict[str, Any]]]] = None

class ChatCompletionRequest(BaseModel):
    model: str
    messages: List[ChatMessage]
    stream: Optional[bool] = False
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
