import typing as t

from pydantic import Field
from pydantic import StringConstraints


ScOutput = t.Annotated[str, Field(description="Raw text captured from the standard output of sc.exe")]
UpperCase = t.Annotated[str, StringConstraints(to_upper=True)]
