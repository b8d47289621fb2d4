from pydantic import BaseModel

class Filters(BaseModel):
    execute: bool = True

class CompilerOptions(BaseModel):
    executorRequest: bool = True

class CompileOptions(BaseModel):
    userArguments: str
    filters: Filters = Filters()
    compilerOptions: CompilerOptions = CompilerOptions()

class CompileRequest(BaseModel):
    source: str
    options: CompileOptions
