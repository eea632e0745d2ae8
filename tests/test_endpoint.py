import amqpkit


def annotate(name, trail):
    def middleware(next):
        def endpoint(context, request):
            trail.append(name)
            return next(context, request)
        return endpoint
    return middleware


def test_chain_order():

    trail = list()

    def endpoint(context, request):
        trail.append('endpoint')
        return request

    wrapped = amqpkit.endpoint.chain(annotate('a', trail), annotate('b', trail), annotate('c', trail))(endpoint)

    assert wrapped(None, 'request') == 'request'
    assert trail == ['a', 'b', 'c', 'endpoint']


def test_chain_single():

    trail = list()
    wrapped = amqpkit.endpoint.chain(annotate('only', trail))(amqpkit.endpoint.nop)

    assert wrapped(None, None) == {}
    assert trail == ['only']


def test_nop_with_subscriber(channel, delivery):

    subscriber = amqpkit.Subscriber(
        amqpkit.endpoint.nop,
        amqpkit.transport.amqp.decode_json_request,
        amqpkit.transport.amqp.encode_json_response,
    )

    subscriber.handle(channel, delivery)

    assert channel.published == [('', 'q1', False, False, b'{}', 'abc')]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
