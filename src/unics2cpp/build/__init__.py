"""Host-side build orchestration: workspace, toolchain invocation and harvesting.

The Unity editor is treated as an opaque child process. Everything this
package knows about it is the project layout it accepts, the command line it
is started with and the directory it writes generated sources into.
"""
