from langgraph.graph import END, START, StateGraph

from app.completion.client import CompletionClient
from app.relay.nodes import check_message_node, make_call_model_node, make_post_reply_node
from app.relay.state import RelayState
from app.slack.client import SlackClient


def _route_after_check(state: RelayState) -> str:
    return "call_model" if state.get("should_reply") else "end"


def _route_after_model(state: RelayState) -> str:
    return "post_reply" if state.get("reply_text") else "end"


def build_relay_graph(completion_client: CompletionClient, slack_client: SlackClient):
    graph = StateGraph(RelayState)

    graph.add_node("check_message", check_message_node)
    graph.add_node("call_model", make_call_model_node(completion_client))
    graph.add_node("post_reply", make_post_reply_node(slack_client))

    graph.add_edge(START, "check_message")
    graph.add_conditional_edges(
        "check_message",
        _route_after_check,
        {
            "call_model": "call_model",
            "end": END,
        },
    )
    graph.add_conditional_edges(
        "call_model",
        _route_after_model,
        {
            "post_reply": "post_reply",
            "end": END,
        },
    )
    graph.add_edge("post_reply", END)

    return graph.compile()
